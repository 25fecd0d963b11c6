from collections.abc import Sequence


class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFormatError(ExtractionError):
    """Raised when the MIME type / filename maps to no extraction strategy."""


class ExtractionFailedError(ExtractionError):
    """Raised when no strategy produced usable text."""

    def __init__(self, message: str, attempted: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.attempted: tuple[str, ...] = tuple(attempted)
