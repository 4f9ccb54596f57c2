"""
Shared utilities for netlist readers.

Provides text file opening with transparent gzip support, used by every
file-based reader.
"""

import contextlib
import gzip
from pathlib import Path
from typing import Iterator, TextIO

__all__ = ["open_text", "is_gzip"]

ENCODING = "utf-8"


def is_gzip(filepath: str | Path) -> bool:
    """Check whether a path names a gzip-compressed file."""
    return Path(filepath).suffix == ".gz"


@contextlib.contextmanager
def open_text(filepath: str | Path) -> Iterator[TextIO]:
    """
    Opens a netlist file for line-wise text reading.

    :param filepath: Path to a plain or '.gz' compressed text file.
    :return: Context manager yielding a text stream.
    """
    if is_gzip(filepath):
        with gzip.open(filepath, "rt", encoding=ENCODING) as f:
            yield f
    else:
        with open(filepath, "r", encoding=ENCODING) as f:
            yield f
