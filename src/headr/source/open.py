"""Mapping of source names to readable binary streams."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from headr.config.types import STDIN_NAME
from headr.errors import SourceUnavailable
from headr.source.types import NamedFile, Source, StandardInput

logger = logging.getLogger(__name__)


def open_source(name: str, stdin: BinaryIO | None = None) -> Source:
    """
    Open a source by name.

    "-" selects standard input (or the injected ``stdin`` stream); any other
    name is opened as a file in binary mode.
    """
    if name == STDIN_NAME:
        return StandardInput(name, stdin if stdin is not None else sys.stdin.buffer)

    try:
        handle = open(name, "rb")  # noqa: SIM115
    except OSError as exc:
        raise SourceUnavailable(name, exc) from exc

    logger.debug("Opened %s", name)
    return NamedFile(name, handle)


def close_source(source: Source) -> None:
    """Release a source. Standard input stays open."""
    if isinstance(source, NamedFile):
        source.stream.close()


@contextmanager
def opened_source(name: str, stdin: BinaryIO | None = None) -> Iterator[Source]:
    """Open a source for the duration of a ``with`` block."""
    source = open_source(name, stdin)
    try:
        yield source
    finally:
        close_source(source)
