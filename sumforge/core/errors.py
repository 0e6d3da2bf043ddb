"""
Parse errors for go.sum files.

Each malformed line produces one SumSyntaxError; a parse that sees any
of them fails with a single SumErrorList holding all of them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Location of a line within a source file."""

    line: int
    line_rune: int
    byte: int


class SumSyntaxError(ValueError):
    """A go.sum line that does not have exactly three fields."""

    def __init__(self, filename: str, pos: Position, line: str):
        self.filename = filename
        self.pos = pos
        self.line = line
        self.message = f"malformed go.sum line: {line}"
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.pos.line_rune > 1:
            return f"{self.filename}:{self.pos.line}:{self.pos.line_rune}: {self.message}"
        return f"{self.filename}:{self.pos.line}: {self.message}"


class SumErrorList(ValueError):
    """
    Aggregate of every syntax error found in one parse.

    Iterating yields the individual errors in line order.
    """

    def __init__(self, errors: list[SumSyntaxError]):
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.errors)

    def __iter__(self) -> Iterator[SumSyntaxError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
