class StorageError(Exception):
    """Raised when a blob cannot be stored, read or removed."""
