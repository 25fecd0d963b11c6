import io

from docx import Document

from docintake.word.exceptions import DocxExtractionError


class DocxTextExtractor:
    """Reads raw text from DOCX paragraphs and tables using python-docx."""

    def extract(self, docx_bytes: bytes) -> str:
        """Return the document's text, one paragraph or table row per line.

        Raises:
            DocxExtractionError: if the bytes are not a readable DOCX file.
        """
        try:
            document = Document(io.BytesIO(docx_bytes))
        except Exception as exc:
            raise DocxExtractionError(f"python-docx failed to open document: {exc}") from exc

        lines = [p.text for p in document.paragraphs if p.text and p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append("\t".join(cells))
        return "\n".join(lines).strip()
