"""Error taxonomy for headr.

``InvalidCount`` is fatal and stops the run before any output. The source-level
errors are recovered by the runner, which reports them and moves on.
"""


class HeadrError(Exception):
    """Base exception for all headr errors."""


class InvalidCount(HeadrError):
    """Raised when a count argument is not a strictly positive integer."""

    def __init__(self, text: str, unit: str = "line"):
        self.text = text
        self.unit = unit
        super().__init__(text)

    @property
    def message(self) -> str:
        return f"illegal {self.unit} count -- {self.text}"


def _describe(error: BaseException) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


class SourceUnavailable(HeadrError):
    """Raised when a named source cannot be opened for reading."""

    def __init__(self, name: str, error: BaseException):
        self.name = name
        self.error = error
        super().__init__(f"{name}: {self.reason}")

    @property
    def reason(self) -> str:
        return _describe(self.error)


class ReadFailure(HeadrError):
    """Raised when reading an already-opened source fails mid-stream."""

    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(self.reason)

    @property
    def reason(self) -> str:
        return _describe(self.error)
