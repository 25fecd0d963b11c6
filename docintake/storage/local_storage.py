import secrets
import string
import time
from pathlib import Path, PurePosixPath

from docintake.storage.base import BaseBlobStorage
from docintake.storage.exceptions import StorageError

_ALPHABET = string.ascii_lowercase + string.digits


def build_storage_handle(filename: str, now_ms: int | None = None) -> str:
    """Build ``documents/{epoch_ms}-{random}.{ext}`` for an uploaded filename."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    token = "".join(secrets.choice(_ALPHABET) for _ in range(6))
    suffix = PurePosixPath(filename).suffix.lower()
    return f"documents/{stamp}-{token}{suffix}"


class LocalFileStorage(BaseBlobStorage):
    """Stores uploaded files under a root directory on local disk."""

    FILES_ROOT = Path("/app/files")

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root if files_root is not None else self.FILES_ROOT

    def store(self, content: bytes, filename: str, mime_type: str) -> str:
        _ = mime_type
        handle = build_storage_handle(filename)
        path = self._resolve_path(handle)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("xb") as fh:
                fh.write(content)
        except OSError as exc:
            raise StorageError(f"Failed to store {filename}: {exc}") from exc
        return handle

    def load(self, handle: str) -> bytes:
        path = self._resolve_path(handle)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path.read_bytes()

    def delete(self, handle: str) -> None:
        path = self._resolve_path(handle)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to delete {handle}: {exc}") from exc

    def _resolve_path(self, handle: str) -> Path:
        root = self._files_root.resolve()
        path = (root / handle).resolve()
        if root not in path.parents:
            raise StorageError(f"Storage handle escapes files root: {handle}")
        return path
