from docintake.extraction.models import Strategy

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
PLAIN_TEXT_MIME_TYPE = "text/plain"
IMAGE_MIME_TYPES = frozenset({
    "image/jpeg",
    # non-standard alias still sent by some browsers and upload clients
    "image/jpg",
    "image/png",
    "image/gif",
    "image/bmp",
    "image/tiff",
})

SUPPORTED_MIME_TYPES = frozenset({
    PDF_MIME_TYPE,
    DOCX_MIME_TYPE,
    PLAIN_TEXT_MIME_TYPE,
    *IMAGE_MIME_TYPES,
})


def normalize_mime_type(mime_type: str | None) -> str:
    """Lower-case a MIME type and drop any ``; param=value`` suffix."""
    if not mime_type:
        return ""
    return mime_type.split(";", 1)[0].strip().lower()


def classify(mime_type: str | None, filename: str | None) -> Strategy:
    """Map a declared MIME type and filename to an extraction strategy.

    The filename only matters for DOCX, which browsers frequently upload
    as ``application/octet-stream``.
    """
    mime = normalize_mime_type(mime_type)
    name = (filename or "").lower()

    if mime == PDF_MIME_TYPE:
        return Strategy.PDF
    if mime == DOCX_MIME_TYPE or name.endswith(".docx"):
        return Strategy.DOCX
    if mime == PLAIN_TEXT_MIME_TYPE:
        return Strategy.PLAIN_TEXT
    if mime in IMAGE_MIME_TYPES:
        return Strategy.IMAGE
    return Strategy.UNSUPPORTED
