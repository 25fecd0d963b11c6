import argparse
import json
import mimetypes
import sys
from pathlib import Path
from typing import Any

from docintake.config.settings import Settings
from docintake.database.connection import close_pool, init_pool
from docintake.database.models import DocumentRecord, UtilityRecord
from docintake.database.repositories.documents_repository import DocumentsRepository
from docintake.database.repositories.utilities_repository import UtilitiesRepository
from docintake.documents.service import DocumentService
from docintake.logging.logger import Log
from docintake.processor.models import DocumentMetadata, UploadedFile
from docintake.processor.processor import build_processor, build_text_extractor
from docintake.storage.local_storage import LocalFileStorage
from docintake.summary.factory import SummarizerFactory
from docintake.utilities.models import UtilityType


def _read_upload(path: Path, mime_type: str | None) -> UploadedFile:
    guessed, _ = mimetypes.guess_type(path.name)
    return UploadedFile(
        content=path.read_bytes(),
        mime_type=mime_type or guessed or "application/octet-stream",
        filename=path.name,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docintake", description="Document intake and AI summarization"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    summarize = sub.add_parser("summarize", help="Extract text and print the AI report")
    summarize.add_argument("path", type=Path)
    summarize.add_argument("--mime-type")

    upload = sub.add_parser("upload", help="Store, summarize and persist a document")
    upload.add_argument("path", type=Path)
    upload.add_argument("--mime-type")
    upload.add_argument("--title", required=True)
    upload.add_argument("--classification", required=True)
    upload.add_argument("--document-type", required=True)
    upload.add_argument("--division-office")
    upload.add_argument("--sender-contact-person")
    upload.add_argument("--sender-email")
    upload.add_argument("--destination-office")
    upload.add_argument("--destination-contact-person")
    upload.add_argument("--destination-email")
    upload.add_argument("--uploaded-by", required=True)

    export = sub.add_parser("export-pdf", help="Write a stored document's report as PDF")
    export.add_argument("document_id", type=int)
    export.add_argument("output", type=Path)

    download = sub.add_parser("download", help="Write a stored document's original file")
    download.add_argument("document_id", type=int)
    download.add_argument("output", type=Path)

    sub.add_parser("list", help="List stored documents, newest first")
    sub.add_parser("stats", help="Print dashboard statistics")

    delete = sub.add_parser("delete", help="Delete a document, its report and its file")
    delete.add_argument("document_id", type=int)

    _add_utilities_parser(sub)
    return parser


def _add_utilities_parser(sub: Any) -> None:
    utilities = sub.add_parser("utilities", help="Manage metadata choice lists")
    actions = utilities.add_subparsers(dest="action", required=True)
    types = [t.value for t in UtilityType]

    list_cmd = actions.add_parser("list", help="List active entries ordered by value")
    list_cmd.add_argument("--type", choices=types)

    add = actions.add_parser("add", help="Add an entry")
    add.add_argument("type", choices=types)
    add.add_argument("value")
    add.add_argument("--description")

    update = actions.add_parser("update", help="Change an entry")
    update.add_argument("utility_id", type=int)
    update.add_argument("--value")
    update.add_argument("--description")
    active = update.add_mutually_exclusive_group()
    active.add_argument("--active", dest="is_active", action="store_true", default=None)
    active.add_argument("--inactive", dest="is_active", action="store_false", default=None)

    remove = actions.add_parser("delete", help="Delete an entry")
    remove.add_argument("utility_id", type=int)


def _summarize(settings: Settings, args: argparse.Namespace) -> None:
    upload = _read_upload(args.path, args.mime_type)
    extraction = build_text_extractor(settings).extract_text(
        upload.content, upload.mime_type, upload.filename
    )
    summarizer = SummarizerFactory.create(settings)
    try:
        report = summarizer.summarize(extraction.text)
    finally:
        summarizer.close()
    payload = {"provenance": extraction.provenance.value, "aiReport": report.to_dict()}
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _upload(settings: Settings, args: argparse.Namespace) -> None:
    metadata = DocumentMetadata(
        title=args.title,
        classification=args.classification,
        document_type=args.document_type,
        division_office=args.division_office,
        sender_contact_person=args.sender_contact_person,
        sender_email=args.sender_email,
        destination_office=args.destination_office,
        destination_contact_person=args.destination_contact_person,
        destination_email=args.destination_email,
    )
    processor = build_processor(settings)
    try:
        result = processor.process(
            _read_upload(args.path, args.mime_type), metadata, args.uploaded_by
        )
    finally:
        processor.close()
    payload = {
        "document": {
            "id": result.document.id,
            "reference_number": result.document.reference_number,
            "file_path": result.document.file_path,
        },
        "provenance": result.extraction.provenance.value,
        "aiReport": result.report.to_dict(),
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _document_summary(document: DocumentRecord) -> dict[str, object]:
    return {
        "id": document.id,
        "reference_number": document.reference_number,
        "title": document.title,
        "classification": document.classification,
        "document_type": document.document_type,
        "file_name": document.file_name,
        "created_at": document.created_at.isoformat() if document.created_at else None,
    }


def _utility_summary(utility: UtilityRecord) -> dict[str, object]:
    return {
        "id": utility.id,
        "type": utility.type,
        "value": utility.value,
        "description": utility.description,
        "is_active": utility.is_active,
    }


def _utilities(args: argparse.Namespace) -> None:
    repo = UtilitiesRepository()
    if args.action == "list":
        payload: object = [_utility_summary(u) for u in repo.list_active(args.type)]
    elif args.action == "add":
        payload = _utility_summary(repo.create(args.type, args.value, args.description))
    elif args.action == "update":
        payload = _utility_summary(
            repo.update(
                args.utility_id,
                value=args.value,
                description=args.description,
                is_active=args.is_active,
            )
        )
    else:
        repo.delete(args.utility_id)
        Log.info(f"Deleted utility {args.utility_id}")
        return
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _review(settings: Settings, args: argparse.Namespace) -> None:
    service = DocumentService(
        doc_repo=DocumentsRepository(),
        storage=LocalFileStorage(files_root=Path(settings.storage_root)),
    )
    if args.command == "export-pdf":
        args.output.write_bytes(service.export_report_pdf(args.document_id))
        Log.info(f"Wrote report for document {args.document_id} to {args.output}")
    elif args.command == "download":
        downloaded = service.download_document(args.document_id)
        args.output.write_bytes(downloaded.content)
        Log.info(f"Wrote {downloaded.file_name} to {args.output}")
    elif args.command == "list":
        documents = [_document_summary(doc) for doc in service.list_documents()]
        print(json.dumps(documents, indent=2, ensure_ascii=False))
    elif args.command == "stats":
        stats = service.dashboard_stats()
        payload = {
            "total_documents": stats.total_documents,
            "total_ai_reports": stats.total_ai_reports,
            "classification_counts": stats.classification_counts,
            "document_type_counts": stats.document_type_counts,
            "recent_uploads": [_document_summary(doc) for doc in stats.recent_uploads],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        service.delete_document(args.document_id)


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> load settings -> run one command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if args.command == "summarize":
        _summarize(settings, args)
        return 0

    init_pool(settings)
    try:
        if args.command == "upload":
            _upload(settings, args)
        elif args.command == "utilities":
            _utilities(args)
        else:
            _review(settings, args)
    finally:
        close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
