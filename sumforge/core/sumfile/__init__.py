"""go.sum system: parsing, editing, formatting, and comparison."""

from sumforge.core.sumfile.entry import GOMOD_SUFFIX, Hash, SumLine
from sumforge.core.sumfile.sum_file import (
    SumFile,
    add_hash,
    cleanup,
    drop_all,
    drop_hash,
)
from sumforge.core.sumfile.parser import parse_sum
from sumforge.core.sumfile.format import format_sum
from sumforge.core.sumfile.hash import SumDiff, compute_sum_hash, diff_sum_files

__all__ = [
    "GOMOD_SUFFIX",
    "Hash",
    "SumLine",
    "SumFile",
    "add_hash",
    "drop_hash",
    "drop_all",
    "cleanup",
    "parse_sum",
    "format_sum",
    "SumDiff",
    "compute_sum_hash",
    "diff_sum_files",
]
