"""Immutable run configuration."""

from dataclasses import dataclass
from typing import TypeAlias

from headr.errors import InvalidCount

# Source name that selects standard input.
STDIN_NAME = "-"

DEFAULT_LINE_COUNT = 10


@dataclass(frozen=True, slots=True)
class Lines:
    """Emit the first ``count`` lines of each source."""

    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise InvalidCount(str(self.count), "line")


@dataclass(frozen=True, slots=True)
class Bytes:
    """Emit the first ``count`` bytes of each source."""

    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise InvalidCount(str(self.count), "byte")


Mode: TypeAlias = Lines | Bytes


@dataclass(frozen=True, slots=True)
class Config:
    """Validated configuration consumed by the runner."""

    sources: tuple[str, ...] = (STDIN_NAME,)
    mode: Mode = Lines(DEFAULT_LINE_COUNT)

    @classmethod
    def from_counts(
        cls,
        sources: list[str] | tuple[str, ...] | None = None,
        lines: int = DEFAULT_LINE_COUNT,
        bytes_: int | None = None,
    ) -> "Config":
        """
        Build a config from separate line and byte counts.

        A byte count always wins: line mode is disabled whenever one is given.
        """
        mode: Mode = Bytes(bytes_) if bytes_ is not None else Lines(lines)
        return cls(sources=tuple(sources) if sources else (STDIN_NAME,), mode=mode)

    @property
    def line_count(self) -> int | None:
        return self.mode.count if isinstance(self.mode, Lines) else None

    @property
    def byte_count(self) -> int | None:
        return self.mode.count if isinstance(self.mode, Bytes) else None

    @property
    def multiple_sources(self) -> bool:
        return len(self.sources) > 1
