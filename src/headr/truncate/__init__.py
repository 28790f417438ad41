"""Line and byte truncation algorithms."""

from headr.truncate.byte_mode import head_bytes, iter_head_bytes
from headr.truncate.line_mode import head_lines, iter_head_lines

__all__ = ["head_bytes", "head_lines", "iter_head_bytes", "iter_head_lines"]
