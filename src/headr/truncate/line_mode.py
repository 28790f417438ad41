"""Line-bounded truncation."""

from collections.abc import Iterator
from typing import BinaryIO

from headr.errors import ReadFailure


def iter_head_lines(stream: BinaryIO, count: int) -> Iterator[bytes]:
    """
    Yield up to ``count`` lines from a binary stream.

    Each line is yielded in its original byte form with its terminator. The
    final line of a stream may have none. Stops quietly at end of stream.
    """
    for _ in range(count):
        try:
            line = stream.readline()
        except OSError as exc:
            raise ReadFailure(exc) from exc

        if not line:
            return
        yield line


def head_lines(stream: BinaryIO, count: int) -> list[bytes]:
    """Collect the first ``count`` lines of a stream."""
    return list(iter_head_lines(stream, count))
