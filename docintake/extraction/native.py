from docintake.pdf.base import BasePdfExtractor
from docintake.word.docx_extractor import DocxTextExtractor


class NativeTextExtractor:
    """Pulls embedded text straight out of document containers."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        docx_extractor: DocxTextExtractor,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._docx_extractor = docx_extractor

    def extract_pdf(self, pdf_bytes: bytes) -> str:
        return self._pdf_extractor.extract(pdf_bytes)

    def extract_docx(self, docx_bytes: bytes) -> str:
        return self._docx_extractor.extract(docx_bytes)

    @staticmethod
    def decode_text(raw: bytes) -> str:
        return raw.decode("utf-8", errors="replace")
