from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: int
    reference_number: str
    title: str
    classification: str
    document_type: str
    file_path: str
    file_name: str
    file_size: int
    mime_type: str
    uploaded_by: str
    division_office: str | None = None
    sender_contact_person: str | None = None
    sender_email: str | None = None
    destination_office: str | None = None
    destination_contact_person: str | None = None
    destination_email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ReportRecord:
    """Represents a row from the document_reports table."""

    id: int
    document_id: int
    purpose_and_scope: str
    summary: str
    highlights: list[str] = field(default_factory=list)
    issues: str = ""
    recommendations: str = ""
    created_at: datetime | None = None


@dataclass
class DashboardStats:
    total_documents: int
    total_ai_reports: int
    recent_uploads: list[DocumentRecord] = field(default_factory=list)
    classification_counts: dict[str, int] = field(default_factory=dict)
    document_type_counts: dict[str, int] = field(default_factory=dict)


@dataclass
class UtilityRecord:
    """Represents a row from the utilities table."""

    id: int
    type: str
    value: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
