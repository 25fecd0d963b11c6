import io

import pytest
from docx import Document
from PIL import Image, ImageDraw
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def make_pdf(pages: list[str]) -> bytes:
    """Build a PDF with one page per entry; empty strings give blank pages."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with known text content."""
    return make_pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return make_pdf(["Page one content", "Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a single blank page."""
    return make_pdf([""])


@pytest.fixture()
def scanned_pdf_bytes() -> bytes:
    """Five blank pages: no embedded text, as a scanned document would have."""
    return make_pdf([""] * 5)


@pytest.fixture()
def png_bytes() -> bytes:
    """Small RGB PNG with dark text on a light background."""
    img = Image.new("RGB", (200, 60), color=(230, 230, 230))
    ImageDraw.Draw(img).text((10, 20), "HELLO OCR", fill=(20, 20, 20))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def docx_bytes() -> bytes:
    doc = Document()
    doc.add_paragraph("Memorandum of agreement")
    doc.add_paragraph("")
    doc.add_paragraph("Second paragraph text")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Budget"
    table.rows[0].cells[1].text = "1000"
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture()
def pdf_factory():  # type: ignore[no-untyped-def]
    return make_pdf
