import re
from pathlib import Path

import pytest

from docintake.storage.exceptions import StorageError
from docintake.storage.local_storage import LocalFileStorage, build_storage_handle

_HANDLE_RE = re.compile(r"^documents/\d+-[a-z0-9]{6}\.pdf$")


class TestBuildStorageHandle:
    def test_format(self) -> None:
        handle = build_storage_handle("Annual Report.PDF", now_ms=1700000000000)
        assert handle.startswith("documents/1700000000000-")
        assert _HANDLE_RE.match(handle)

    def test_without_extension(self) -> None:
        handle = build_storage_handle("README", now_ms=1)
        assert re.match(r"^documents/1-[a-z0-9]{6}$", handle)

    def test_handles_are_unique(self) -> None:
        handles = {build_storage_handle("a.pdf", now_ms=1) for _ in range(50)}
        assert len(handles) > 1


class TestLocalFileStorage:
    def test_store_and_load(self, tmp_path: Path) -> None:
        storage = LocalFileStorage(files_root=tmp_path)
        handle = storage.store(b"%PDF-1.4 data", "report.pdf", "application/pdf")

        assert _HANDLE_RE.match(handle)
        assert (tmp_path / handle).read_bytes() == b"%PDF-1.4 data"
        assert storage.load(handle) == b"%PDF-1.4 data"

    def test_load_missing_raises(self, tmp_path: Path) -> None:
        storage = LocalFileStorage(files_root=tmp_path)
        with pytest.raises(FileNotFoundError, match="File not found"):
            storage.load("documents/1-abcdef.pdf")

    def test_delete_removes_file(self, tmp_path: Path) -> None:
        storage = LocalFileStorage(files_root=tmp_path)
        handle = storage.store(b"data", "a.txt", "text/plain")
        storage.delete(handle)
        assert not (tmp_path / handle).exists()

    def test_delete_missing_is_noop(self, tmp_path: Path) -> None:
        LocalFileStorage(files_root=tmp_path).delete("documents/1-abcdef.pdf")

    def test_handle_outside_root_is_rejected(self, tmp_path: Path) -> None:
        storage = LocalFileStorage(files_root=tmp_path / "files")
        with pytest.raises(StorageError, match="escapes files root"):
            storage.load("../../etc/passwd")

    def test_store_failure_raises_storage_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "files"
        blocker.write_text("not a directory")
        storage = LocalFileStorage(files_root=blocker)
        with pytest.raises(StorageError, match="Failed to store"):
            storage.store(b"data", "a.pdf", "application/pdf")
