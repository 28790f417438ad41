"""Multi-source orchestration: banners, truncation and per-source errors."""

import logging
import sys
from typing import BinaryIO, TextIO

from headr.config.types import Bytes, Config, Lines
from headr.errors import ReadFailure, SourceUnavailable
from headr.runner.types import RunState, RunStats
from headr.source import Source, opened_source
from headr.truncate import iter_head_bytes, iter_head_lines
from headr.truncate.types import TEXT_ENCODING

logger = logging.getLogger(__name__)


def format_banner(name: str, leading_blank: bool) -> bytes:
    """Render the ``==> name <==`` header that precedes a source's output."""
    banner = f"==> {name} <==\n"
    if leading_blank:
        banner = "\n" + banner
    return banner.encode(TEXT_ENCODING, errors="surrogateescape")


def write_source(source: Source, config: Config, stdout: BinaryIO) -> None:
    """Write the truncated content of one opened source."""
    mode = config.mode
    if isinstance(mode, Lines):
        for line in iter_head_lines(source.stream, mode.count):
            stdout.write(line)
    elif isinstance(mode, Bytes):
        for text in iter_head_bytes(source.stream, mode.count):
            stdout.write(text.encode(TEXT_ENCODING))
    else:
        raise TypeError(f"unknown truncation mode: {mode!r}")


def report(stderr: TextIO, stdout: BinaryIO, name: str, reason: str) -> None:
    """Write a ``<name>: <reason>`` diagnostic after pending output."""
    stdout.flush()
    print(f"{name}: {reason}", file=stderr)


def run(
    config: Config,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
    stdin: BinaryIO | None = None,
) -> RunStats:
    """
    Process every configured source in order.

    A source that fails to open or read is reported on ``stderr`` and skipped;
    the run itself never fails because of a single source.
    """
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    state = RunState()
    stats = RunStats()
    show_banners = config.multiple_sources

    logger.debug("Starting: sources=%d, mode=%s", len(config.sources), config.mode)

    for name in config.sources:
        stats.sources_attempted += 1

        try:
            with opened_source(name, stdin) as source:
                if show_banners:
                    stdout.write(format_banner(name, leading_blank=state.banner_printed))

                try:
                    write_source(source, config, stdout)
                except ReadFailure as exc:
                    stats.read_failures += 1
                    logger.debug("Read failed for %s: %s", name, exc.reason)
                    report(stderr, stdout, name, exc.reason)

                state.banner_printed = True
        except SourceUnavailable as exc:
            stats.open_failures += 1
            logger.debug("Cannot open %s: %s", name, exc.reason)
            report(stderr, stdout, name, exc.reason)

    stdout.flush()
    logger.debug(
        "Done: %d sources attempted, %d failed to open, %d failed to read",
        stats.sources_attempted,
        stats.open_failures,
        stats.read_failures,
    )
    return stats
