"""
In-memory go.sum file and its editing operations.

Entries are kept in insertion order, which is also output order. Removal
is two-phase: drop_hash and drop_all only mark entries, and cleanup
physically removes the marked ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from sumforge.core.module_version import ModuleVersion
from sumforge.core.sumfile.entry import Hash

logger = logging.getLogger(__name__)


@dataclass
class SumFile:
    """
    The parsed, interpreted form of a go.sum file.

    Not safe for concurrent mutation; callers sharing one instance across
    threads must serialize access themselves.
    """

    hashes: list[Hash] = field(default_factory=list)

    def __len__(self) -> int:
        """Number of live entries."""
        return sum(1 for h in self.hashes if h.is_live)

    def __iter__(self) -> Iterator[Hash]:
        return self.live_hashes()

    def live_hashes(self) -> Iterator[Hash]:
        """Iterate over live entries in file order."""
        return (h for h in self.hashes if h.is_live)

    def find(self, mod: ModuleVersion, gomod: bool | None = None) -> list[Hash]:
        """
        Find live entries for a module version.

        Args:
            mod: Module version to look up.
            gomod: If given, only return entries with this go.mod flag.

        Returns:
            Matching entries in file order.
        """
        return [
            h
            for h in self.live_hashes()
            if h.mod == mod and (gomod is None or h.gomod == gomod)
        ]

    def modules(self) -> list[ModuleVersion]:
        """Module versions with at least one live entry, in first-seen order."""
        seen: dict[ModuleVersion, None] = {}
        for h in self.live_hashes():
            seen.setdefault(h.mod, None)
        return list(seen)

    def add_hash(self, mod: ModuleVersion, gomod: bool, hash: str) -> None:
        """
        Add a hash entry.

        Adding an entry whose (path, version, gomod, hash) matches a live
        entry is a no-op. Dropped entries never block an addition.
        Fields are stored as given; a path, version or hash that is empty
        or contains whitespace formats to a line that will not parse back,
        so callers taking user input must reject those first.

        Args:
            mod: Module version the hash belongs to.
            gomod: Whether this is the hash of the module's go.mod file.
            hash: Hash string, stored verbatim.
        """
        key = (mod.path, mod.version, gomod, hash)
        for h in self.hashes:
            if h.is_live and h.key == key:
                return

        self.hashes.append(Hash.added(mod, gomod, hash))
        logger.debug("added %s gomod=%s", mod, gomod)

    def drop_hash(self, mod: ModuleVersion, gomod: bool) -> None:
        """
        Mark entries for a module version and go.mod flag as dropped.

        Entries for the same version with the other flag are kept.
        """
        dropped = 0
        for h in self.hashes:
            if h.is_live and h.mod == mod and h.gomod == gomod:
                h.dropped = True
                dropped += 1
        if dropped:
            logger.debug("dropped %d entry(s) for %s gomod=%s", dropped, mod, gomod)

    def drop_all(self, mod: ModuleVersion) -> None:
        """Mark every entry for a module version as dropped, zip and go.mod alike."""
        dropped = 0
        for h in self.hashes:
            if h.is_live and h.mod == mod:
                h.dropped = True
                dropped += 1
        if dropped:
            logger.debug("dropped %d entry(s) for %s", dropped, mod)

    def cleanup(self) -> None:
        """
        Remove dropped entries.

        Surviving entries keep their relative order. When nothing was
        dropped the backing list is left untouched.
        """
        if all(h.is_live for h in self.hashes):
            return
        before = len(self.hashes)
        self.hashes[:] = [h for h in self.hashes if h.is_live]
        logger.debug("cleanup removed %d entry(s)", before - len(self.hashes))

    @classmethod
    def parse(cls, file: str, data: bytes | str) -> SumFile:
        """Parse go.sum content. See sumforge.core.sumfile.parser.parse_sum."""
        from sumforge.core.sumfile.parser import parse_sum

        return parse_sum(file, data)

    def format(self) -> bytes:
        """Format in canonical style. See sumforge.core.sumfile.format.format_sum."""
        from sumforge.core.sumfile.format import format_sum

        return format_sum(self)


def add_hash(sum_file: SumFile, mod: ModuleVersion, gomod: bool, hash: str) -> None:
    """Add a hash entry to sum_file."""
    sum_file.add_hash(mod, gomod, hash)


def drop_hash(sum_file: SumFile, mod: ModuleVersion, gomod: bool) -> None:
    """Drop the zip or go.mod entries for mod from sum_file."""
    sum_file.drop_hash(mod, gomod)


def drop_all(sum_file: SumFile, mod: ModuleVersion) -> None:
    """Drop every entry for mod from sum_file."""
    sum_file.drop_all(mod)


def cleanup(sum_file: SumFile) -> None:
    """Remove dropped entries from sum_file."""
    sum_file.cleanup()
