class DocxExtractionError(Exception):
    """Raised when text cannot be read from a DOCX container."""
