from abc import ABC, abstractmethod


class BaseBlobStorage(ABC):
    """Contract for uploaded-file blob storage."""

    @abstractmethod
    def store(self, content: bytes, filename: str, mime_type: str) -> str:
        """Persist bytes and return an opaque storage handle."""

    @abstractmethod
    def load(self, handle: str) -> bytes:
        """Return the bytes stored under ``handle``.

        Raises:
            FileNotFoundError: if nothing is stored under the handle.
        """

    @abstractmethod
    def delete(self, handle: str) -> None:
        """Remove the blob. Deleting a missing handle is not an error."""
