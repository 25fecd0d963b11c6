import pytest

from docintake.word.docx_extractor import DocxTextExtractor
from docintake.word.exceptions import DocxExtractionError


class TestDocxTextExtractor:
    def test_extracts_paragraphs_in_order(self, docx_bytes: bytes) -> None:
        text = DocxTextExtractor().extract(docx_bytes)
        lines = text.splitlines()
        assert lines[0] == "Memorandum of agreement"
        assert lines[1] == "Second paragraph text"

    def test_includes_table_cells(self, docx_bytes: bytes) -> None:
        text = DocxTextExtractor().extract(docx_bytes)
        assert "Budget\t1000" in text

    def test_invalid_bytes_raise(self) -> None:
        with pytest.raises(DocxExtractionError, match="python-docx"):
            DocxTextExtractor().extract(b"not a zip file")
