"""
go.sum Read/Write Utilities.

File access lives here so the parsing and editing core stays free of I/O.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sumforge.core.sumfile.format import format_sum
from sumforge.core.sumfile.parser import parse_sum
from sumforge.core.sumfile.sum_file import SumFile

logger = logging.getLogger(__name__)


def read_sum_file(path: str | Path, *, missing_ok: bool = False) -> SumFile:
    """
    Read and parse a go.sum file.

    Args:
        path: Path to the file. Its string form labels any parse errors.
        missing_ok: If True, a missing file reads as an empty SumFile.

    Returns:
        Parsed SumFile.

    Raises:
        FileNotFoundError: If the file is missing and missing_ok is False.
        SumErrorList: If the file has malformed lines.

    Example:
        >>> sum_file = read_sum_file("go.sum", missing_ok=True)
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        if not missing_ok:
            raise
        logger.info("%s not found, starting empty", path)
        return SumFile()
    return parse_sum(str(path), data)


def write_sum_file(
    path: str | Path,
    sum_file: SumFile,
    *,
    cleanup: bool = True,
) -> int:
    """
    Format and write a go.sum file.

    Args:
        path: Output path.
        sum_file: File to write.
        cleanup: Whether to remove dropped entries from sum_file first.

    Returns:
        Number of entries written.
    """
    path = Path(path)
    if cleanup:
        sum_file.cleanup()
    path.write_bytes(format_sum(sum_file))
    count = len(sum_file)
    logger.info("wrote %d entries to %s", count, path)
    return count
