import io
from datetime import datetime

import pdfplumber

from docintake.database.models import DocumentRecord, ReportRecord
from docintake.reports.pdf_exporter import ReportPdfExporter


def _make_document(**overrides: object) -> DocumentRecord:
    values: dict = {
        "id": 3,
        "reference_number": "REF-2024-05-01-ABC123",
        "title": "Budget memo",
        "classification": "Internal",
        "document_type": "Memo",
        "file_path": "documents/1714521600000-abc123.pdf",
        "file_name": "memo.pdf",
        "file_size": 9,
        "mime_type": "application/pdf",
        "uploaded_by": "7",
        "division_office": "Finance",
        "created_at": datetime(2024, 5, 1, 9, 30),
    }
    values.update(overrides)
    return DocumentRecord(**values)


def _make_report(**overrides: object) -> ReportRecord:
    values: dict = {
        "id": 11,
        "document_id": 3,
        "purpose_and_scope": "Requests approval of the training budget.",
        "summary": "The memo describes costs and schedule.",
        "highlights": ["Budget of 1000", "Two weeks", "Ten people", "Regional venue"],
        "issues": "1. Venue not confirmed",
        "recommendations": "1. Confirm the venue",
    }
    values.update(overrides)
    return ReportRecord(**values)


def _text(pdf_bytes: bytes) -> str:
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


class TestReportPdfExporter:
    def test_produces_pdf(self) -> None:
        result = ReportPdfExporter().export(_make_document(), _make_report())
        assert result.startswith(b"%PDF")

    def test_contains_sections_and_metadata(self) -> None:
        text = _text(ReportPdfExporter().export(_make_document(), _make_report()))
        for expected in (
            "Budget memo",
            "REF-2024-05-01-ABC123",
            "Finance",
            "Purpose & Scope",
            "Summary",
            "Highlights",
            "Ten people",
            "Issues",
            "Recommendations",
            "Confirm the venue",
            "2024-05-01 09:30",
        ):
            assert expected in text

    def test_escapes_markup_characters(self) -> None:
        report = _make_report(summary="Costs < 5% & rising")
        text = _text(ReportPdfExporter().export(_make_document(), report))
        assert "Costs < 5% & rising" in text

    def test_omits_empty_optional_metadata(self) -> None:
        document = _make_document(division_office=None)
        text = _text(ReportPdfExporter().export(document, _make_report()))
        assert "Division / Office" not in text
