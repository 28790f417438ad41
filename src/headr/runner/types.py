"""State and statistics for a multi-source run."""

from dataclasses import dataclass


@dataclass
class RunState:
    """Whether any banner has been written yet in this run."""

    banner_printed: bool = False


@dataclass
class RunStats:
    """Statistics from a run over all configured sources."""

    sources_attempted: int = 0
    open_failures: int = 0
    read_failures: int = 0
