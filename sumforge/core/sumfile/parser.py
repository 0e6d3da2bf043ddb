"""
go.sum line parser.

Splits file content into lines, validates the three-field shape of each
non-blank line, and assembles a SumFile. All malformed lines are reported
together; no partial SumFile is ever returned.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from sumforge.core.errors import Position, SumErrorList, SumSyntaxError
from sumforge.core.sumfile.entry import Hash, decode_content, encode_content
from sumforge.core.sumfile.sum_file import SumFile

logger = logging.getLogger(__name__)

# Unicode White_Space characters. str.split and str.strip would also treat
# the \x1c-\x1f separators as whitespace; field splitting here does not.
SPACE_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_FIELD_SEP = re.compile(f"[{re.escape(SPACE_CHARS)}]+")


def iter_lines(text: str) -> Iterator[tuple[int, int, str]]:
    """
    Iterate over the lines of text.

    A final chunk without a trailing newline is still yielded.

    Args:
        text: File content.

    Yields:
        Tuples of (1-based line number, byte offset of line start, raw line).
    """
    lineno = 0
    offset = 0
    while text:
        lineno += 1
        line, _, text = text.partition("\n")
        yield lineno, offset, line
        offset += len(encode_content(line)) + 1


def parse_sum_line(line: str) -> tuple[str, str, str] | None:
    """
    Split a go.sum line into path, version and hash.

    Returns:
        The three fields, or None if the line does not have exactly three.
    """
    fields = _FIELD_SEP.split(line.strip(SPACE_CHARS))
    if len(fields) != 3:
        return None
    return fields[0], fields[1], fields[2]


def parse_sum(file: str, data: bytes | str) -> SumFile:
    """
    Parse a go.sum file.

    Args:
        file: Name of the file, used only in error messages.
        data: Content of the file. Bytes are decoded as UTF-8; invalid
            sequences are kept as-is and written back unchanged.

    Returns:
        Parsed SumFile, possibly empty.

    Raises:
        SumErrorList: If any line is malformed.
    """
    text = decode_content(data) if isinstance(data, bytes) else data

    sum_file = SumFile()
    errors: list[SumSyntaxError] = []

    for lineno, offset, raw in iter_lines(text):
        line = raw.strip(SPACE_CHARS)
        if not line:
            continue

        fields = parse_sum_line(line)
        if fields is None:
            errors.append(
                SumSyntaxError(
                    filename=file,
                    pos=Position(line=lineno, line_rune=1, byte=offset),
                    line=line,
                )
            )
            continue

        path, version, hash_value = fields
        sum_file.hashes.append(Hash.from_fields(path, version, hash_value, offset))

    if errors:
        logger.warning("%s: %d malformed line(s)", file, len(errors))
        raise SumErrorList(errors)

    logger.debug("%s: parsed %d hash entries", file, len(sum_file.hashes))
    return sum_file
