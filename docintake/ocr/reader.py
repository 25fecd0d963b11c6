"""OCR over standalone images and over rasterized PDF pages."""

from docintake.logging.logger import Log
from docintake.ocr.base import BaseOcrEngine, ProgressCallback
from docintake.ocr.exceptions import OcrFailedError
from docintake.ocr.preprocessor import ImagePreprocessor
from docintake.pdf.rasterizer import PdfRasterizer


def page_marker(page_number: int) -> str:
    return f"=== Page {page_number} ==="


def _log_progress(label: str) -> ProgressCallback:
    def report(stage: str, fraction: float) -> None:
        Log.debug(f"{label} OCR progress ({stage}): {round(fraction * 100)}%")

    return report


class OcrReader:
    """Composes preprocessing, rasterization and an OCR engine."""

    def __init__(
        self,
        *,
        engine: BaseOcrEngine,
        preprocessor: ImagePreprocessor,
        rasterizer: PdfRasterizer,
        language: str = "eng",
        min_text_length: int = 10,
        max_pages: int = 10,
    ) -> None:
        self._engine = engine
        self._preprocessor = preprocessor
        self._rasterizer = rasterizer
        self._language = language
        self._min_text_length = min_text_length
        self._max_pages = max_pages

    def read_image(self, image_bytes: bytes) -> str:
        """Enhance and OCR a single image.

        Raises:
            OcrFailedError: if fewer than ``min_text_length`` characters
                were recognized.
        """
        enhanced = self._preprocessor.enhance(image_bytes)
        text = self._engine.recognize(
            enhanced, language=self._language, progress=_log_progress("Image")
        )
        if len(text.strip()) < self._min_text_length:
            raise OcrFailedError("OCR failed to extract meaningful text from image")
        Log.info(f"OCR completed: extracted {len(text)} characters")
        return text

    def read_pdf(self, pdf_bytes: bytes) -> str:
        """Rasterize up to ``max_pages`` pages and OCR them in order.

        Each non-empty page contributes ``=== Page N ===`` followed by its
        text. A page whose OCR errors out is skipped.

        Raises:
            RasterizationError: if the PDF cannot be rendered.
            OcrFailedError: if the combined text is below ``min_text_length``.
        """
        total = self._rasterizer.page_count(pdf_bytes)
        processed = min(total, self._max_pages)
        if total > self._max_pages:
            Log.warning(
                f"PDF has {total} pages, OCR limited to the first {self._max_pages}"
            )

        chunks: list[str] = []
        pages = self._rasterizer.rasterize(pdf_bytes, max_pages=self._max_pages)
        for page_number, page_png in enumerate(pages, start=1):
            Log.info(f"Processing page {page_number} of {total}...")
            try:
                enhanced = self._preprocessor.enhance(page_png)
                text = self._engine.recognize(
                    enhanced,
                    language=self._language,
                    progress=_log_progress(f"Page {page_number}"),
                )
            except OcrFailedError as exc:
                Log.warning(f"OCR skipped page {page_number}: {exc}")
                continue
            if text.strip():
                chunks.append(f"\n\n{page_marker(page_number)}\n{text}")

        combined = "".join(chunks)
        if len(combined.strip()) < self._min_text_length:
            raise OcrFailedError("OCR failed to extract meaningful text from PDF")
        Log.info(
            f"PDF OCR completed: extracted {len(combined)} characters "
            f"from {processed} pages"
        )
        return combined
