import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import ListFlowable, ListItem, Paragraph, SimpleDocTemplate, Spacer

from docintake.database.models import DocumentRecord, ReportRecord


def _markup(text: str) -> str:
    """Escape text for a reportlab Paragraph, keeping line breaks."""
    return escape(text.strip()).replace("\n", "<br/>")


class ReportPdfExporter:
    """Renders a document's AI report as a printable A4 PDF."""

    def export(self, document: DocumentRecord, report: ReportRecord) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=56,
            rightMargin=56,
            topMargin=56,
            bottomMargin=56,
            title=f"AI Report - {document.title}",
        )
        styles = getSampleStyleSheet()
        title_style = styles["Heading1"]
        title_style.textColor = colors.HexColor("#1f2937")
        heading = styles["Heading3"]
        body = styles["Normal"]

        elems = [Paragraph(_markup(document.title), title_style), Spacer(1, 6)]
        for label, value in self._metadata_lines(document):
            elems.append(Paragraph(f"<b>{label}:</b> {_markup(value)}", body))
        elems.append(Spacer(1, 12))

        elems.append(Paragraph("Purpose &amp; Scope", heading))
        elems.append(Paragraph(_markup(report.purpose_and_scope), body))
        elems.append(Spacer(1, 8))

        elems.append(Paragraph("Summary", heading))
        elems.append(Paragraph(_markup(report.summary), body))
        elems.append(Spacer(1, 8))

        elems.append(Paragraph("Highlights", heading))
        elems.append(
            ListFlowable(
                [ListItem(Paragraph(_markup(h), body), leftIndent=10) for h in report.highlights],
                bulletType="bullet",
            )
        )
        elems.append(Spacer(1, 8))

        elems.append(Paragraph("Issues", heading))
        elems.append(Paragraph(_markup(report.issues), body))
        elems.append(Spacer(1, 8))

        elems.append(Paragraph("Recommendations", heading))
        elems.append(Paragraph(_markup(report.recommendations), body))

        doc.build(elems)
        return buffer.getvalue()

    @staticmethod
    def _metadata_lines(document: DocumentRecord) -> list[tuple[str, str]]:
        lines = [
            ("Reference Number", document.reference_number),
            ("Classification", document.classification),
            ("Document Type", document.document_type),
            ("File", document.file_name),
        ]
        optional = [
            ("Division / Office", document.division_office),
            ("Sender", document.sender_contact_person),
            ("Destination Office", document.destination_office),
            ("Destination Contact", document.destination_contact_person),
        ]
        lines.extend((label, value) for label, value in optional if value)
        if document.created_at is not None:
            lines.append(("Uploaded", document.created_at.strftime("%Y-%m-%d %H:%M")))
        return lines
