"""Input sources: standard input and named files."""

from headr.source.open import close_source, open_source, opened_source
from headr.source.types import NamedFile, Source, StandardInput

__all__ = ["NamedFile", "Source", "StandardInput", "close_source", "open_source", "opened_source"]
