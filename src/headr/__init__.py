"""headr - print the first lines or bytes of files."""

__version__ = "0.1.0"

from headr.config import Config  # noqa: E402
from headr.runner import run  # noqa: E402

__all__ = ["Config", "__version__", "run"]
