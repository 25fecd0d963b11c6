from dataclasses import dataclass

from docintake.database.models import DashboardStats, DocumentRecord, ReportRecord
from docintake.database.repositories.documents_repository import DocumentsRepository
from docintake.logging.logger import Log
from docintake.processor.exceptions import DocumentNotFoundError
from docintake.reports.pdf_exporter import ReportPdfExporter
from docintake.storage.base import BaseBlobStorage


@dataclass(frozen=True)
class DownloadedFile:
    content: bytes
    file_name: str
    mime_type: str


class DocumentService:
    """Read, download, export and delete operations over stored documents."""

    def __init__(
        self,
        doc_repo: DocumentsRepository,
        storage: BaseBlobStorage,
        exporter: ReportPdfExporter | None = None,
    ) -> None:
        self._doc_repo = doc_repo
        self._storage = storage
        self._exporter = exporter or ReportPdfExporter()

    def list_documents(self) -> list[DocumentRecord]:
        return self._doc_repo.list_all()

    def get_document(self, document_id: int) -> tuple[DocumentRecord, ReportRecord | None]:
        document = self._doc_repo.find_by_id(document_id)
        return document, self._doc_repo.find_report(document_id)

    def download_document(self, document_id: int) -> DownloadedFile:
        document = self._doc_repo.find_by_id(document_id)
        content = self._storage.load(document.file_path)
        return DownloadedFile(
            content=content,
            file_name=document.file_name,
            mime_type=document.mime_type,
        )

    def export_report_pdf(self, document_id: int) -> bytes:
        """Render the document's AI report as PDF.

        Raises:
            DocumentNotFoundError: if the document or its report is missing.
        """
        document, report = self.get_document(document_id)
        if report is None:
            raise DocumentNotFoundError(f"Document {document_id} has no AI report")
        return self._exporter.export(document, report)

    def delete_document(self, document_id: int) -> None:
        """Delete the stored file, then the record (and its report).

        A storage failure is logged and does not block the record delete.
        """
        document = self._doc_repo.find_by_id(document_id)
        try:
            self._storage.delete(document.file_path)
        except Exception as exc:
            Log.error(f"Storage delete error for document {document_id}: {exc}")
        self._doc_repo.delete(document_id)
        Log.info(f"Deleted document {document_id}")

    def dashboard_stats(self) -> DashboardStats:
        return self._doc_repo.get_dashboard_stats()
