from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from docintake.database.connection import get_connection
from docintake.database.models import DashboardStats, DocumentRecord, ReportRecord
from docintake.processor.exceptions import DocumentNotFoundError
from docintake.processor.models import NewDocument
from docintake.summary.models import AIReport

_DOCUMENT_COLUMNS = """
    id, reference_number, title, classification, document_type,
    division_office, sender_contact_person, sender_email,
    destination_office, destination_contact_person, destination_email,
    file_path, file_name, file_size, mime_type, uploaded_by,
    created_at, updated_at
"""

_REPORT_COLUMNS = """
    id, document_id, purpose_and_scope, summary, highlights,
    issues, recommendations, created_at
"""

_GROUPABLE_COLUMNS = frozenset({"classification", "document_type"})


class DocumentsRepository:
    """Database operations for the documents and document_reports tables."""

    def create_with_report(
        self, document: NewDocument, report: AIReport
    ) -> tuple[DocumentRecord, ReportRecord]:
        """Insert a document and its AI report in a single transaction."""
        columns = {
            "reference_number": document.reference_number,
            **document.metadata.as_columns(),
            "file_path": document.file_path,
            "file_name": document.file_name,
            "file_size": document.file_size,
            "mime_type": document.mime_type,
            "uploaded_by": document.uploaded_by,
        }
        names = ", ".join(columns)
        placeholders = ", ".join(["%s"] * len(columns))
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"INSERT INTO documents ({names}) VALUES ({placeholders}) "
                    f"RETURNING {_DOCUMENT_COLUMNS}",
                    tuple(columns.values()),
                )
                doc_row = cur.fetchone()
                if doc_row is None:
                    raise RuntimeError("Document insert returned no row")
                cur.execute(
                    f"""
                    INSERT INTO document_reports
                        (document_id, purpose_and_scope, summary, highlights,
                         issues, recommendations)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    RETURNING {_REPORT_COLUMNS}
                    """,
                    (
                        doc_row["id"],
                        report.purpose_and_scope,
                        report.summary,
                        Jsonb(list(report.highlights)),
                        report.issues,
                        report.recommendations,
                    ),
                )
                report_row = cur.fetchone()
                if report_row is None:
                    raise RuntimeError("Report insert returned no row")
            conn.commit()
        return _to_document(doc_row), _to_report(report_row)

    def find_by_id(self, document_id: int) -> DocumentRecord:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_DOCUMENT_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _to_document(row)

    def find_report(self, document_id: int) -> ReportRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_REPORT_COLUMNS} FROM document_reports "
                    "WHERE document_id = %s ORDER BY created_at DESC LIMIT 1",
                    (document_id,),
                )
                row = cur.fetchone()
        return _to_report(row) if row is not None else None

    def list_all(self, limit: int | None = None) -> list[DocumentRecord]:
        """Return documents newest first."""
        query = f"SELECT {_DOCUMENT_COLUMNS} FROM documents ORDER BY created_at DESC"
        params: tuple[Any, ...] = ()
        if limit is not None:
            query += " LIMIT %s"
            params = (limit,)
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, params)
                rows = cur.fetchall()
        return [_to_document(row) for row in rows]

    def delete(self, document_id: int) -> None:
        """Delete a document; its report goes with it (ON DELETE CASCADE).

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM documents WHERE id = %s", (document_id,))
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()

    def get_dashboard_stats(self, recent_limit: int = 5) -> DashboardStats:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT count(*) FROM documents")
                total_documents = _scalar(cur.fetchone())
                cur.execute("SELECT count(*) FROM document_reports")
                total_reports = _scalar(cur.fetchone())
                classification_counts = self._count_by(cur, "classification")
                document_type_counts = self._count_by(cur, "document_type")

        return DashboardStats(
            total_documents=total_documents,
            total_ai_reports=total_reports,
            recent_uploads=self.list_all(limit=recent_limit),
            classification_counts=classification_counts,
            document_type_counts=document_type_counts,
        )

    @staticmethod
    def _count_by(cur: Any, column: str) -> dict[str, int]:
        if column not in _GROUPABLE_COLUMNS:
            raise ValueError(f"Cannot group documents by '{column}'")
        cur.execute(f"SELECT {column}, count(*) FROM documents GROUP BY {column}")
        return {str(key): int(count) for key, count in cur.fetchall()}


def _scalar(row: Any) -> int:
    return int(row[0]) if row is not None else 0


def _to_document(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=row["id"],
        reference_number=row["reference_number"],
        title=row["title"],
        classification=row["classification"],
        document_type=row["document_type"],
        file_path=row["file_path"],
        file_name=row["file_name"],
        file_size=row["file_size"],
        mime_type=row["mime_type"],
        uploaded_by=str(row["uploaded_by"]),
        division_office=row.get("division_office"),
        sender_contact_person=row.get("sender_contact_person"),
        sender_email=row.get("sender_email"),
        destination_office=row.get("destination_office"),
        destination_contact_person=row.get("destination_contact_person"),
        destination_email=row.get("destination_email"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def _to_report(row: dict[str, Any]) -> ReportRecord:
    return ReportRecord(
        id=row["id"],
        document_id=row["document_id"],
        purpose_and_scope=row["purpose_and_scope"],
        summary=row["summary"],
        highlights=list(row.get("highlights") or []),
        issues=row["issues"],
        recommendations=row["recommendations"],
        created_at=row.get("created_at"),
    )
