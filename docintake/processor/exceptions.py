class UploadError(Exception):
    """Base exception for upload handling errors."""


class FileTooLargeError(UploadError):
    """Raised when an upload exceeds the configured size limit."""


class EmptyUploadError(UploadError):
    """Raised when no file content was provided."""


class MissingMetadataError(UploadError):
    """Raised when required document metadata fields are blank."""


class DocumentNotFoundError(UploadError):
    """Raised when a document cannot be found in the database."""


class InvalidMetadataError(UploadError):
    """Raised when a metadata value is not an active catalog entry."""
