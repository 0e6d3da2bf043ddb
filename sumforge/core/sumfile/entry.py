"""
go.sum hash entries.

A Hash carries the interpreted meaning of one line. Its SumLine keeps the
raw text and source offset for diagnostics and never takes part in
equality or lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sumforge.core.module_version import ModuleVersion

# Version suffix marking the hash of a module's go.mod file
GOMOD_SUFFIX = "/go.mod"

# Offset recorded for entries that were added rather than parsed
ADDED_OFFSET = -1

# Bytes that are not valid UTF-8 survive a decode/encode cycle unchanged
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def decode_content(data: bytes) -> str:
    """Decode go.sum bytes, keeping invalid UTF-8 bytes as lone surrogates."""
    return data.decode(ENCODING, ENCODING_ERRORS)


def encode_content(text: str) -> bytes:
    """Inverse of decode_content."""
    return text.encode(ENCODING, ENCODING_ERRORS)


def split_gomod_suffix(version: str) -> tuple[str, bool]:
    """
    Strip the go.mod suffix from a version field.

    Args:
        version: Version field as written in the file.

    Returns:
        Tuple of (bare version, whether the suffix was present).
    """
    if version.endswith(GOMOD_SUFFIX):
        return version[: -len(GOMOD_SUFFIX)], True
    return version, False


def join_gomod_suffix(version: str, gomod: bool) -> str:
    """Inverse of split_gomod_suffix."""
    if gomod:
        return version + GOMOD_SUFFIX
    return version


@dataclass(frozen=True)
class SumLine:
    """Original fields of a go.sum line."""

    path: str
    version: str
    hash: str
    offset: int = ADDED_OFFSET

    @property
    def is_added(self) -> bool:
        """Whether this line was added in memory rather than parsed."""
        return self.offset == ADDED_OFFSET


@dataclass
class Hash:
    """
    A single hash entry in a go.sum file.

    The entry gives the hash of either the module zip (gomod False) or
    the module's go.mod file (gomod True, "/go.mod" suffix in the file).
    Dropped entries stay in the owning SumFile until cleanup runs.
    """

    mod: ModuleVersion
    hash: str
    gomod: bool = False
    syntax: SumLine | None = field(default=None, compare=False, repr=False)
    dropped: bool = False

    @property
    def is_live(self) -> bool:
        """Whether the entry is still part of the file."""
        return not self.dropped

    @property
    def key(self) -> tuple[str, str, bool, str]:
        """Identity used for duplicate detection."""
        return (self.mod.path, self.mod.version, self.gomod, self.hash)

    @property
    def version_field(self) -> str:
        """Version as it appears in the file, with the go.mod suffix if any."""
        return join_gomod_suffix(self.mod.version, self.gomod)

    def to_line(self) -> str:
        """Render in canonical form, without the line terminator."""
        return f"{self.mod.path} {self.version_field} {self.hash}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "path": self.mod.path,
            "version": self.mod.version,
            "gomod": self.gomod,
            "hash": self.hash,
            "offset": self.syntax.offset if self.syntax else ADDED_OFFSET,
        }

    @classmethod
    def from_fields(cls, path: str, version: str, hash: str, offset: int) -> Hash:
        """
        Create an entry from the three raw fields of a line.

        Args:
            path: Module path field.
            version: Version field, possibly with the go.mod suffix.
            hash: Hash field.
            offset: Byte offset of the line start in the source.

        Returns:
            Hash with the suffix interpreted and the raw fields preserved.
        """
        bare, gomod = split_gomod_suffix(version)
        return cls(
            mod=ModuleVersion(path=path, version=bare),
            hash=hash,
            gomod=gomod,
            syntax=SumLine(path=path, version=version, hash=hash, offset=offset),
        )

    @classmethod
    def added(cls, mod: ModuleVersion, gomod: bool, hash: str) -> Hash:
        """Create an entry that did not come from a parsed file."""
        return cls(
            mod=mod,
            hash=hash,
            gomod=gomod,
            syntax=SumLine(
                path=mod.path,
                version=join_gomod_suffix(mod.version, gomod),
                hash=hash,
                offset=ADDED_OFFSET,
            ),
        )
