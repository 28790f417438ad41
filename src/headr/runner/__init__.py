"""Multi-source runner."""

from headr.runner.run import format_banner, run, write_source
from headr.runner.types import RunState, RunStats

__all__ = ["RunState", "RunStats", "format_banner", "run", "write_source"]
