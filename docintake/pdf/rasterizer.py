from collections.abc import Iterator

import pymupdf

from docintake.pdf.exceptions import RasterizationError


class PdfRasterizer:
    """Renders PDF pages to PNG images for OCR."""

    DEFAULT_SCALE = 2.0

    def __init__(self, scale: float = DEFAULT_SCALE) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self._scale = scale

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return doc.page_count
        except Exception as exc:
            raise RasterizationError(f"Failed to open PDF: {exc}") from exc

    def rasterize(
        self,
        pdf_bytes: bytes,
        scale: float | None = None,
        max_pages: int | None = None,
    ) -> Iterator[bytes]:
        """Yield one PNG per page, in page order.

        The document is opened on first iteration and pages are rendered
        one at a time; pages past ``max_pages`` are never rendered.

        Raises:
            RasterizationError: if the PDF cannot be opened or a page fails
                to render. Raised during iteration.
        """
        zoom = scale if scale is not None else self._scale
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise RasterizationError(f"Failed to open PDF: {exc}") from exc

        with doc:
            limit = doc.page_count if max_pages is None else min(doc.page_count, max_pages)
            matrix = pymupdf.Matrix(zoom, zoom)
            for index in range(limit):
                try:
                    pixmap = doc[index].get_pixmap(matrix=matrix)
                    png = pixmap.tobytes("png")
                except Exception as exc:
                    raise RasterizationError(
                        f"Failed to render page {index + 1}: {exc}"
                    ) from exc
                yield png
