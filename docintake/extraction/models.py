from dataclasses import dataclass, field
from enum import Enum


class Strategy(str, Enum):
    """How text is pulled out of an uploaded buffer."""

    PDF = "pdf"
    DOCX = "docx"
    PLAIN_TEXT = "plain-text"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


class Provenance(str, Enum):
    """Which extraction path produced the final text."""

    NATIVE = "native"
    OCR = "ocr"
    OCR_PER_PAGE = "ocr-per-page"


@dataclass(frozen=True)
class ExtractionResult:
    """Text extracted from one upload plus where it came from."""

    text: str
    provenance: Provenance
    attempted: tuple[str, ...] = field(default_factory=tuple)
