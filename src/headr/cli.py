"""Command-line interface for headr."""

import argparse
import logging
import os
import sys

from headr import __version__
from headr.config import Config, parse_positive_int
from headr.config.types import DEFAULT_LINE_COUNT, STDIN_NAME
from headr.errors import InvalidCount
from headr.runner import run

# Environment variable providing the default --log-level.
HEADR_LOG_LEVEL_ENV = "HEADR_LOG_LEVEL"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def default_log_level() -> str:
    """Return the log level from the environment, falling back to WARNING."""
    level = os.environ.get(HEADR_LOG_LEVEL_ENV, "").upper()
    return level if level in LOG_LEVELS else "WARNING"


def silence_stdout() -> None:
    """Point stdout at the null device so the final flush at exit stays quiet."""
    try:
        stdout_fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stdout_fd)
    os.close(devnull)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="headr",
        description="Print the first lines or bytes of each file.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        default=[STDIN_NAME],
        help="Input files (default: - for stdin)",
    )

    count_group = parser.add_mutually_exclusive_group()
    count_group.add_argument(
        "-n",
        "--lines",
        metavar="LINES",
        default=str(DEFAULT_LINE_COUNT),
        help=f"Print the first LINES lines of each file (default: {DEFAULT_LINE_COUNT})",
    )
    count_group.add_argument(
        "-c",
        "--bytes",
        metavar="BYTES",
        help="Print the first BYTES bytes of each file",
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help=f"Logging level (default: WARNING, or ${HEADR_LOG_LEVEL_ENV})",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def build_config(args: argparse.Namespace) -> Config:
    """
    Validate parsed arguments into a Config.

    The byte count is checked first. The line count is only checked when byte
    mode is not selected.
    """
    if args.bytes is not None:
        return Config.from_counts(args.files, bytes_=parse_positive_int(args.bytes, "byte"))

    return Config.from_counts(args.files, lines=parse_positive_int(args.lines, "line"))


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(logging, args.log_level))

    try:
        config = build_config(args)
    except InvalidCount as exc:
        print(exc.message, file=sys.stderr)
        return 1

    try:
        run(config)
    except BrokenPipeError:
        # The reader closed the pipe early, e.g. `headr big.txt | head -1`.
        silence_stdout()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
