"""Fallback policy table for text extraction.

Each strategy has a primary step and an ordered list of escalation rules.
A rule fires when the stripped text produced so far is shorter than its
threshold; it then runs its target step, unless that step already ran for
the same buffer.
"""

from dataclasses import dataclass, field
from enum import Enum

from docintake.config.settings import Settings
from docintake.extraction.models import Provenance, Strategy


class Step(str, Enum):
    NATIVE_PDF = "native-pdf"
    NATIVE_DOCX = "native-docx"
    DECODE_TEXT = "plain-text"
    OCR_IMAGE = "ocr"
    OCR_PDF_PAGES = "ocr-per-page"

    @property
    def provenance(self) -> Provenance:
        if self is Step.OCR_IMAGE:
            return Provenance.OCR
        if self is Step.OCR_PDF_PAGES:
            return Provenance.OCR_PER_PAGE
        return Provenance.NATIVE


@dataclass(frozen=True)
class EscalationRule:
    below: int
    target: Step


@dataclass(frozen=True)
class PolicyEntry:
    primary: Step
    escalations: tuple[EscalationRule, ...] = ()


@dataclass(frozen=True)
class FallbackPolicy:
    """Thresholds and the strategy -> escalation table derived from them."""

    scanned_text_threshold: int = 100
    minimal_text_threshold: int = 50
    ocr_max_pages: int = 10
    table: dict[Strategy, PolicyEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.ocr_max_pages < 1:
            raise ValueError("ocr_max_pages must be at least 1")
        table = {
            Strategy.PLAIN_TEXT: PolicyEntry(primary=Step.DECODE_TEXT),
            Strategy.DOCX: PolicyEntry(primary=Step.NATIVE_DOCX),
            Strategy.PDF: PolicyEntry(
                primary=Step.NATIVE_PDF,
                escalations=(
                    EscalationRule(self.scanned_text_threshold, Step.OCR_PDF_PAGES),
                    EscalationRule(self.minimal_text_threshold, Step.OCR_PDF_PAGES),
                ),
            ),
            Strategy.IMAGE: PolicyEntry(
                primary=Step.OCR_IMAGE,
                escalations=(
                    EscalationRule(self.minimal_text_threshold, Step.OCR_IMAGE),
                ),
            ),
        }
        object.__setattr__(self, "table", table)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FallbackPolicy":
        return cls(
            scanned_text_threshold=settings.scanned_text_threshold,
            minimal_text_threshold=settings.minimal_text_threshold,
            ocr_max_pages=settings.ocr_max_pages,
        )

    def entry_for(self, strategy: Strategy) -> PolicyEntry:
        """Return the policy entry for a strategy.

        Raises:
            KeyError: for Strategy.UNSUPPORTED, which has no entry.
        """
        return self.table[strategy]
