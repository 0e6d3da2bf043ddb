"""
go.sum fingerprinting and comparison.

Fingerprints are taken over the canonical formatting, so two files with
the same live entries in the same order hash identically regardless of
blank lines, spacing, or pending drops.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import xxhash

from sumforge.core.sumfile.format import format_sum

if TYPE_CHECKING:
    from sumforge.core.sumfile.entry import Hash
    from sumforge.core.sumfile.sum_file import SumFile


def compute_sum_hash(sum_file: SumFile) -> str:
    """
    Compute hash of a go.sum file's live content.

    Args:
        sum_file: The file to hash.

    Returns:
        Hex-encoded hash string.
    """
    return xxhash.xxh64(format_sum(sum_file)).hexdigest()


def compute_file_hash(path: str | Path) -> str:
    """
    Compute hash of a file's raw bytes, blank lines and spacing included.

    Comparing this with compute_sum_hash tells whether the file on disk
    is already in canonical form.
    """
    return xxhash.xxh64(Path(path).read_bytes()).hexdigest()


@dataclass
class SumDiff:
    """Entries present on only one side of a comparison."""

    added: list[Hash] = field(default_factory=list)
    removed: list[Hash] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "added": [h.to_dict() for h in self.added],
            "removed": [h.to_dict() for h in self.removed],
        }


def diff_sum_files(old: SumFile, new: SumFile) -> SumDiff:
    """
    Compare the live entries of two go.sum files.

    Entries are matched on (path, version, gomod, hash); order does not
    affect the result.

    Args:
        old: Baseline file.
        new: File to compare against the baseline.

    Returns:
        SumDiff with entries only in new (added) and only in old (removed),
        each listed in its own file's order.
    """
    old_keys = {h.key for h in old.live_hashes()}
    new_keys = {h.key for h in new.live_hashes()}
    return SumDiff(
        added=[h for h in new.live_hashes() if h.key not in old_keys],
        removed=[h for h in old.live_hashes() if h.key not in new_keys],
    )
