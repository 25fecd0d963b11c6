from dataclasses import dataclass, fields

from docintake.database.models import DocumentRecord
from docintake.extraction.models import ExtractionResult
from docintake.summary.models import AIReport


@dataclass(frozen=True)
class UploadedFile:
    """Raw upload as received from the caller. Never persisted as-is."""

    content: bytes
    mime_type: str
    filename: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class DocumentMetadata:
    """User-entered fields stored alongside the document."""

    title: str
    classification: str
    document_type: str
    division_office: str | None = None
    sender_contact_person: str | None = None
    sender_email: str | None = None
    destination_office: str | None = None
    destination_contact_person: str | None = None
    destination_email: str | None = None

    REQUIRED = ("title", "classification", "document_type")

    def missing_fields(self) -> list[str]:
        return [name for name in self.REQUIRED if not (getattr(self, name) or "").strip()]

    def as_columns(self) -> dict[str, str | None]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class NewDocument:
    """A document row about to be inserted."""

    reference_number: str
    metadata: DocumentMetadata
    file_path: str
    file_name: str
    file_size: int
    mime_type: str
    uploaded_by: str


@dataclass
class UploadResult:
    document: DocumentRecord
    report: AIReport
    extraction: ExtractionResult
