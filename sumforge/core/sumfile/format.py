"""
Canonical go.sum formatting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sumforge.core.sumfile.entry import encode_content

if TYPE_CHECKING:
    from sumforge.core.sumfile.sum_file import SumFile


def format_sum(sum_file: SumFile) -> bytes:
    """
    Format a go.sum file in standard style.

    Each live entry becomes one "path version[/go.mod] hash" line ending in
    a newline. Dropped entries are skipped whether or not cleanup has run.
    An empty file formats to empty bytes.

    Args:
        sum_file: File to format. Not modified.

    Returns:
        UTF-8 encoded content. Bytes that were not valid UTF-8 in the
        parsed source are reproduced unchanged.
    """
    return encode_content("".join(h.to_line() + "\n" for h in sum_file.live_hashes()))


def is_canonical(data: bytes, sum_file: SumFile) -> bool:
    """Whether data is exactly the canonical formatting of sum_file."""
    return format_sum(sum_file) == data
