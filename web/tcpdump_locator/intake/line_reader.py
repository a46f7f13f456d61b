"""
Line reader: yields text lines from a capture log stream (typically tcpdump on stdin).

End of stream simply ends iteration. Read errors (OSError) are not caught here;
the caller decides whether they are fatal.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Iterable, Iterator, TextIO


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield each line of `stream` without its trailing newline."""
    for line in stream:
        yield line.rstrip("\r\n")


def open_text(binary: BinaryIO) -> TextIO:
    """
    Wrap a binary stream for line reading.

    Capture output may carry arbitrary payload bytes; undecodable bytes are
    replaced rather than treated as read errors.
    """
    return io.TextIOWrapper(binary, encoding="utf-8", errors="replace", newline="")
