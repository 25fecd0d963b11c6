import io

import pytest
from PIL import Image

from docintake.ocr.exceptions import OcrFailedError
from docintake.ocr.preprocessor import ImagePreprocessor


class TestImagePreprocessor:
    def test_outputs_greyscale_png(self, png_bytes: bytes) -> None:
        result = ImagePreprocessor().enhance(png_bytes)
        with Image.open(io.BytesIO(result)) as img:
            assert img.format == "PNG"
            assert img.mode == "L"

    def test_preserves_dimensions(self, png_bytes: bytes) -> None:
        result = ImagePreprocessor().enhance(png_bytes)
        with Image.open(io.BytesIO(result)) as img:
            assert img.size == (200, 60)

    def test_stretches_contrast(self, png_bytes: bytes) -> None:
        result = ImagePreprocessor().enhance(png_bytes)
        with Image.open(io.BytesIO(result)) as img:
            low, high = img.getextrema()
        assert low < 20
        assert high > 240

    def test_is_deterministic(self, png_bytes: bytes) -> None:
        preprocessor = ImagePreprocessor()
        assert preprocessor.enhance(png_bytes) == preprocessor.enhance(png_bytes)

    def test_accepts_jpeg(self) -> None:
        buf = io.BytesIO()
        Image.new("RGB", (32, 32), color=(120, 10, 10)).save(buf, format="JPEG")
        result = ImagePreprocessor().enhance(buf.getvalue())
        assert result.startswith(b"\x89PNG")

    def test_unreadable_bytes_raise(self) -> None:
        with pytest.raises(OcrFailedError, match="Unreadable image"):
            ImagePreprocessor().enhance(b"definitely not an image")

    def test_oversized_image_raises_ocr_failed(
        self, png_bytes: bytes, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
        with pytest.raises(OcrFailedError, match="too large"):
            ImagePreprocessor().enhance(png_bytes)
