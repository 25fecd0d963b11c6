from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from docintake.database.models import DocumentRecord
from docintake.extraction.models import ExtractionResult
from docintake.processor.models import DocumentMetadata, UploadedFile
from docintake.summary.models import AIReport


class UploadStage(str, Enum):
    IDLE = "idle"
    STORED = "stored"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    SUMMARIZING = "summarizing"
    SUMMARIZED = "summarized"
    PERSISTED = "persisted"
    FAILED = "failed"


@dataclass(slots=True)
class UploadContext:
    file: UploadedFile
    metadata: DocumentMetadata
    uploaded_by: str
    stage: UploadStage = UploadStage.IDLE
    storage_handle: str | None = None
    extraction: ExtractionResult | None = None
    report: AIReport | None = None
    document: DocumentRecord | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: UploadContext) -> UploadContext:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the step."""
