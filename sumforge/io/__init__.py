"""I/O utilities: go.sum file read/write."""

from sumforge.io.sum_rw import read_sum_file, write_sum_file

__all__ = [
    "read_sum_file",
    "write_sum_file",
]
