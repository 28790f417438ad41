"""Input source variants."""

from dataclasses import dataclass
from typing import BinaryIO, TypeAlias


@dataclass(frozen=True, slots=True)
class StandardInput:
    """The process-shared standard input. Never closed by headr."""

    name: str
    stream: BinaryIO


@dataclass(frozen=True, slots=True)
class NamedFile:
    """A file handle owned exclusively for the duration of one source."""

    name: str
    stream: BinaryIO


Source: TypeAlias = StandardInput | NamedFile
