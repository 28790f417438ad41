"""Byte-bounded truncation with lossy decoding."""

import codecs
from collections.abc import Iterator
from typing import BinaryIO

from headr.errors import ReadFailure
from headr.truncate.types import BUFFER_SIZE, TEXT_ENCODING


def iter_head_bytes(
    stream: BinaryIO,
    count: int,
    chunk_size: int = BUFFER_SIZE,
) -> Iterator[str]:
    """
    Yield the lossy decoding of the first ``count`` bytes of a stream.

    Reads in chunks of at most ``chunk_size`` bytes through an incremental
    decoder, so a character split across two reads decodes intact. A character
    cut by the byte limit itself decodes to U+FFFD. The count is a byte count
    and is never moved to a character boundary.
    """
    decoder = codecs.getincrementaldecoder(TEXT_ENCODING)(errors="replace")
    remaining = count

    while remaining > 0:
        try:
            chunk = stream.read(min(remaining, chunk_size))
        except OSError as exc:
            raise ReadFailure(exc) from exc

        if not chunk:
            break
        remaining -= len(chunk)

        text = decoder.decode(chunk)
        if text:
            yield text

    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def head_bytes(stream: BinaryIO, count: int) -> str:
    """Return the lossy decoding of the first ``count`` bytes of a stream."""
    return "".join(iter_head_bytes(stream, count))
