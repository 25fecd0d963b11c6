from pathlib import Path

from docintake.config.settings import Settings
from docintake.database.repositories.documents_repository import DocumentsRepository
from docintake.database.repositories.utilities_repository import UtilitiesRepository
from docintake.extraction.native import NativeTextExtractor
from docintake.extraction.orchestrator import TextExtractor
from docintake.extraction.policy import FallbackPolicy
from docintake.logging.logger import Log
from docintake.ocr.preprocessor import ImagePreprocessor
from docintake.ocr.reader import OcrReader
from docintake.ocr.tesseract_adapter import TesseractOcrAdapter
from docintake.pdf.factory import PdfExtractorFactory
from docintake.pdf.rasterizer import PdfRasterizer
from docintake.processor.models import DocumentMetadata, UploadedFile, UploadResult
from docintake.processor.pipeline import PipelineStep, UploadContext
from docintake.processor.steps import (
    CleanupStep,
    ExtractTextStep,
    PersistDocumentStep,
    StoreFileStep,
    SummarizeStep,
    ValidateUploadStep,
)
from docintake.storage.base import BaseBlobStorage
from docintake.storage.local_storage import LocalFileStorage
from docintake.summary.factory import SummarizerFactory
from docintake.word.docx_extractor import DocxTextExtractor


class UploadProcessor:
    """Runs the upload pipeline: validate -> store -> extract -> summarize -> persist.

    Any step failure runs the cleanup step and re-raises the original error,
    so a failed upload leaves neither a stored blob nor a record behind.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(
        self,
        file: UploadedFile,
        metadata: DocumentMetadata,
        uploaded_by: str,
    ) -> UploadResult:
        Log.info(
            f"Processing upload '{file.filename}' ({file.size_bytes} bytes, "
            f"{file.mime_type}) from user {uploaded_by}"
        )
        context = UploadContext(file=file, metadata=metadata, uploaded_by=uploaded_by)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise

        if context.document is None or context.report is None or context.extraction is None:
            raise RuntimeError("Upload pipeline finished without a persisted document")
        return UploadResult(
            document=context.document,
            report=context.report,
            extraction=context.extraction,
        )

    def close(self) -> None:
        for step in self._steps:
            step.close()
        self._failed_step.close()


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Wire native extractors, OCR and the fallback policy from settings."""
    native = NativeTextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        docx_extractor=DocxTextExtractor(),
    )
    ocr = OcrReader(
        engine=TesseractOcrAdapter(timeout_seconds=settings.ocr_page_timeout_seconds),
        preprocessor=ImagePreprocessor(),
        rasterizer=PdfRasterizer(scale=settings.rasterize_scale),
        language=settings.ocr_language,
        min_text_length=settings.ocr_min_text_length,
        max_pages=settings.ocr_max_pages,
    )
    return TextExtractor(
        native=native,
        ocr=ocr,
        policy=FallbackPolicy.from_settings(settings),
    )


def build_processor(
    settings: Settings,
    storage: BaseBlobStorage | None = None,
    doc_repo: DocumentsRepository | None = None,
    catalog: UtilitiesRepository | None = None,
) -> UploadProcessor:
    """Build an UploadProcessor with all required adapters."""
    storage = storage or LocalFileStorage(files_root=Path(settings.storage_root))
    doc_repo = doc_repo or DocumentsRepository()
    if catalog is None and settings.validate_metadata_against_utilities:
        catalog = UtilitiesRepository()
    steps: list[PipelineStep] = [
        ValidateUploadStep(max_upload_bytes=settings.max_upload_bytes, catalog=catalog),
        StoreFileStep(storage=storage),
        ExtractTextStep(extractor=build_text_extractor(settings)),
        SummarizeStep(summarizer=SummarizerFactory.create(settings)),
        PersistDocumentStep(doc_repo=doc_repo),
    ]
    return UploadProcessor(steps=steps, failed_step=CleanupStep(storage=storage))
