"""Configuration types and count parsing."""

from headr.config.count import parse_positive_int
from headr.config.types import STDIN_NAME, Bytes, Config, Lines, Mode

__all__ = ["Bytes", "Config", "Lines", "Mode", "STDIN_NAME", "parse_positive_int"]
