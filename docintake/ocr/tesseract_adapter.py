import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from docintake.ocr.base import BaseOcrEngine, ProgressCallback
from docintake.ocr.exceptions import OcrFailedError


class TesseractOcrAdapter(BaseOcrEngine):
    """OCR adapter built on the Tesseract CLI via pytesseract."""

    def __init__(self, timeout_seconds: int = 60, config: str = "") -> None:
        self._timeout_seconds = timeout_seconds
        self._config = config

    def recognize(
        self,
        image_bytes: bytes,
        language: str = "eng",
        progress: ProgressCallback | None = None,
    ) -> str:
        try:
            image = Image.open(io.BytesIO(image_bytes))
        except Image.DecompressionBombError as exc:
            raise OcrFailedError(f"Image too large to process: {exc}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise OcrFailedError(f"Unreadable image: {exc}") from exc

        if progress is not None:
            progress("recognizing text", 0.0)
        try:
            with image:
                text = pytesseract.image_to_string(
                    image,
                    lang=language,
                    config=self._config,
                    timeout=self._timeout_seconds,
                )
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrFailedError(f"Tesseract is not installed: {exc}") from exc
        except pytesseract.TesseractError as exc:
            raise OcrFailedError(f"Tesseract failed: {exc}") from exc
        except RuntimeError as exc:
            # pytesseract signals its timeout with a bare RuntimeError
            raise OcrFailedError(f"Tesseract timed out: {exc}") from exc
        if progress is not None:
            progress("recognizing text", 1.0)
        return text or ""
