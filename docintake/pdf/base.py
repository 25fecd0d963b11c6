from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for native PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract embedded text from PDF bytes without rendering pages.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text, pages joined by newlines, stripped.
            Empty string for image-only (scanned) PDFs.

        Raises:
            PdfExtractionError: if the PDF cannot be opened or parsed.
        """
