class PdfError(Exception):
    """Base exception for PDF handling errors."""


class PdfExtractionError(PdfError):
    """Raised when native text extraction from a PDF fails."""


class RasterizationError(PdfError):
    """Raised when PDF pages cannot be rendered to images."""
