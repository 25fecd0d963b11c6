class OcrFailedError(Exception):
    """Raised when OCR produced no meaningful text or the engine failed.

    Used as a fallback signal inside extraction; callers outside the
    extraction package see ExtractionFailedError instead.
    """
