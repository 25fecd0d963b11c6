import secrets
import string
from datetime import datetime, timezone

from docintake.database.repositories.documents_repository import DocumentsRepository
from docintake.database.repositories.utilities_repository import UtilitiesRepository
from docintake.extraction.exceptions import UnsupportedFormatError
from docintake.extraction.formats import classify
from docintake.extraction.models import Strategy
from docintake.extraction.orchestrator import TextExtractor
from docintake.logging.logger import Log
from docintake.processor.exceptions import (
    EmptyUploadError,
    FileTooLargeError,
    InvalidMetadataError,
    MissingMetadataError,
)
from docintake.processor.models import NewDocument
from docintake.processor.pipeline import PipelineStep, UploadContext, UploadStage
from docintake.storage.base import BaseBlobStorage
from docintake.summary.base import BaseSummarizer
from docintake.utilities.models import UtilityType

_REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


def generate_reference_number(now: datetime | None = None) -> str:
    """Build ``REF-YYYY-MM-DD-XXXXXX`` with six random upper-case alphanumerics."""
    moment = now or datetime.now(timezone.utc)
    suffix = "".join(secrets.choice(_REFERENCE_ALPHABET) for _ in range(6))
    return f"REF-{moment:%Y-%m-%d}-{suffix}"


class ValidateUploadStep(PipelineStep):
    """Rejects an upload before anything is stored.

    When a utilities catalog is given, classification and document type must
    match one of its active entries. A type with no active entries accepts
    any value.
    """

    _CATALOG_FIELDS = (
        ("classification", UtilityType.CLASSIFICATION),
        ("document_type", UtilityType.DOCUMENT_TYPE),
    )

    def __init__(
        self,
        max_upload_bytes: int,
        catalog: UtilitiesRepository | None = None,
    ) -> None:
        self._max_upload_bytes = max_upload_bytes
        self._catalog = catalog

    def run(self, context: UploadContext) -> UploadContext:
        upload = context.file
        if not upload.content:
            raise EmptyUploadError("No file uploaded")
        if upload.size_bytes > self._max_upload_bytes:
            raise FileTooLargeError(
                f"File is {upload.size_bytes} bytes, limit is {self._max_upload_bytes}"
            )
        missing = context.metadata.missing_fields()
        if missing:
            raise MissingMetadataError(f"Missing required fields: {', '.join(missing)}")
        if classify(upload.mime_type, upload.filename) is Strategy.UNSUPPORTED:
            raise UnsupportedFormatError(
                f"Invalid file type '{upload.mime_type}'. Only PDF, DOCX, TXT and "
                "image files (JPG, PNG, GIF, BMP, TIFF) are allowed."
            )
        if self._catalog is not None:
            self._check_catalog(self._catalog, context)
        return context

    def _check_catalog(self, catalog: UtilitiesRepository, context: UploadContext) -> None:
        for field_name, utility_type in self._CATALOG_FIELDS:
            allowed = catalog.active_values(utility_type)
            value = getattr(context.metadata, field_name).strip()
            if allowed and value not in allowed:
                raise InvalidMetadataError(
                    f"Unknown {utility_type.value.replace('_', ' ')} '{value}'"
                )


class StoreFileStep(PipelineStep):
    def __init__(self, storage: BaseBlobStorage) -> None:
        self._storage = storage

    def run(self, context: UploadContext) -> UploadContext:
        upload = context.file
        context.storage_handle = self._storage.store(
            upload.content, upload.filename, upload.mime_type
        )
        context.stage = UploadStage.STORED
        Log.info(f"Stored '{upload.filename}' as {context.storage_handle}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: UploadContext) -> UploadContext:
        context.stage = UploadStage.EXTRACTING
        upload = context.file
        context.extraction = self._extractor.extract_text(
            upload.content, upload.mime_type, upload.filename
        )
        context.stage = UploadStage.EXTRACTED
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, summarizer: BaseSummarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: UploadContext) -> UploadContext:
        if context.extraction is None:
            raise ValueError("UploadContext.extraction must be set before summarization")
        context.stage = UploadStage.SUMMARIZING
        context.report = self._summarizer.summarize(context.extraction.text)
        context.stage = UploadStage.SUMMARIZED
        return context

    def close(self) -> None:
        self._summarizer.close()


class PersistDocumentStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: UploadContext) -> UploadContext:
        if context.report is None:
            raise ValueError("UploadContext.report must be set before persist")
        if context.storage_handle is None:
            raise ValueError("UploadContext.storage_handle must be set before persist")
        upload = context.file
        new_document = NewDocument(
            reference_number=generate_reference_number(),
            metadata=context.metadata,
            file_path=context.storage_handle,
            file_name=upload.filename,
            file_size=upload.size_bytes,
            mime_type=upload.mime_type,
            uploaded_by=context.uploaded_by,
        )
        document, _report = self._doc_repo.create_with_report(new_document, context.report)
        context.document = document
        context.stage = UploadStage.PERSISTED
        Log.info(f"Persisted document {document.id} ({document.reference_number})")
        return context


class CleanupStep(PipelineStep):
    """Compensates a failed upload by removing the already-stored blob."""

    def __init__(self, storage: BaseBlobStorage) -> None:
        self._storage = storage

    def run(self, context: UploadContext) -> UploadContext:
        failed_at = context.stage
        context.stage = UploadStage.FAILED
        Log.error(
            f"Upload of '{context.file.filename}' failed at {failed_at.value}: "
            f"{context.error_message}"
        )
        if context.storage_handle is None:
            return context
        try:
            self._storage.delete(context.storage_handle)
        except Exception as exc:
            Log.error(f"Failed to remove stored file {context.storage_handle}: {exc}")
        else:
            Log.info(f"Removed stored file {context.storage_handle}")
            context.storage_handle = None
        return context
