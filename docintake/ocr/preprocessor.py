import io

from PIL import Image, ImageFilter, ImageOps, UnidentifiedImageError

from docintake.ocr.exceptions import OcrFailedError


class ImagePreprocessor:
    """Greyscale -> histogram normalization -> sharpen, re-encoded as PNG."""

    def enhance(self, image_bytes: bytes) -> bytes:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                img.seek(0)
                gray = ImageOps.grayscale(img)
        except Image.DecompressionBombError as exc:
            raise OcrFailedError(f"Image too large to process: {exc}") from exc
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise OcrFailedError(f"Unreadable image: {exc}") from exc

        normalized = ImageOps.autocontrast(gray)
        sharpened = normalized.filter(ImageFilter.SHARPEN)

        out = io.BytesIO()
        sharpened.save(out, format="PNG")
        return out.getvalue()
