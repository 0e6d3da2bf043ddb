"""
Module identity.

A module path paired with one of its published versions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ModuleVersion:
    """
    Identity of a specific module version.

    Equality is exact on both fields; no case folding or
    version normalization is applied.
    """

    path: str
    version: str

    def __str__(self) -> str:
        if not self.version:
            return self.path
        return f"{self.path}@{self.version}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"path": self.path, "version": self.version}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModuleVersion:
        """Create from dictionary."""
        return cls(path=data["path"], version=data["version"])
