"""Best-effort text extraction with length-driven OCR escalation."""

from collections.abc import Callable

from docintake.extraction.exceptions import ExtractionFailedError, UnsupportedFormatError
from docintake.extraction.formats import classify
from docintake.extraction.models import ExtractionResult, Strategy
from docintake.extraction.native import NativeTextExtractor
from docintake.extraction.policy import FallbackPolicy, Step
from docintake.logging.logger import Log
from docintake.ocr.exceptions import OcrFailedError
from docintake.ocr.reader import OcrReader
from docintake.pdf.exceptions import PdfExtractionError, RasterizationError
from docintake.word.exceptions import DocxExtractionError


class TextExtractor:
    """Runs the primary step for a buffer's strategy, then escalates.

    Escalation steps are memoized per call: a step that already ran for
    this buffer is never run again, whatever the policy table says.
    """

    def __init__(
        self,
        *,
        native: NativeTextExtractor,
        ocr: OcrReader,
        policy: FallbackPolicy | None = None,
    ) -> None:
        self._native = native
        self._ocr = ocr
        self._policy = policy or FallbackPolicy()

    def extract_text(self, buffer: bytes, mime_type: str, filename: str) -> ExtractionResult:
        """Extract text from an uploaded buffer.

        Raises:
            UnsupportedFormatError: if no strategy applies; nothing is run.
            ExtractionFailedError: if every applicable step came up empty,
                or a step with no fallback (DOCX) failed.
        """
        strategy = classify(mime_type, filename)
        if strategy is Strategy.UNSUPPORTED:
            raise UnsupportedFormatError(f"Unsupported file type: {mime_type}")

        entry = self._policy.entry_for(strategy)
        attempted: list[str] = []
        Log.info(f"Extracting text from '{filename}' using {strategy.value} strategy")

        text = self._run_primary(entry.primary, buffer, attempted)
        provenance = entry.primary.provenance

        for rule in entry.escalations:
            length = len(text.strip())
            if length >= rule.below:
                continue
            if rule.target.value in attempted:
                Log.debug(
                    f"Text length {length} < {rule.below}, "
                    f"{rule.target.value} already attempted"
                )
                continue
            Log.info(
                f"Text length {length} < {rule.below}, escalating to {rule.target.value}"
            )
            escalated = self._run_escalation(rule.target, buffer, attempted)
            if escalated is not None:
                text, provenance = escalated, rule.target.provenance

        if not text.strip():
            raise ExtractionFailedError(
                f"No text could be extracted from '{filename}' "
                f"(attempted: {', '.join(attempted)})",
                attempted=attempted,
            )

        Log.info(
            f"Extracted {len(text)} chars from '{filename}' via {provenance.value}"
        )
        return ExtractionResult(text=text, provenance=provenance, attempted=tuple(attempted))

    def _steps(self) -> dict[Step, Callable[[bytes], str]]:
        return {
            Step.DECODE_TEXT: self._native.decode_text,
            Step.NATIVE_DOCX: self._native.extract_docx,
            Step.NATIVE_PDF: self._native.extract_pdf,
            Step.OCR_IMAGE: self._ocr.read_image,
            Step.OCR_PDF_PAGES: self._ocr.read_pdf,
        }

    def _run_primary(self, step: Step, buffer: bytes, attempted: list[str]) -> str:
        attempted.append(step.value)
        run = self._steps()[step]
        try:
            return run(buffer)
        except DocxExtractionError as exc:
            raise ExtractionFailedError(str(exc), attempted=attempted) from exc
        except PdfExtractionError as exc:
            Log.warning(f"Native PDF extraction failed, treating as scanned: {exc}")
            return ""
        except (OcrFailedError, RasterizationError) as exc:
            Log.warning(f"{step.value} produced no usable text: {exc}")
            return ""

    def _run_escalation(
        self, step: Step, buffer: bytes, attempted: list[str]
    ) -> str | None:
        """Run an OCR escalation; None means keep the text we already have."""
        attempted.append(step.value)
        try:
            return self._steps()[step](buffer)
        except RasterizationError as exc:
            Log.warning(f"PDF rasterization failed, keeping native text: {exc}")
        except OcrFailedError as exc:
            Log.warning(f"{step.value} failed, keeping previous text: {exc}")
        return None
