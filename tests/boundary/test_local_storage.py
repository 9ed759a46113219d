"""
Test suite for LocalFileStorage.

System role: Verification of stored document path resolution
"""

from pathlib import Path

from quizgenie.boundary.storage.local_storage import LocalFileStorage
from quizgenie.configs.storage import StorageSettings


class TestLocalFileStorage:
    """Test suite for LocalFileStorage.resolve()."""

    def test_should_resolve_relative_path_under_base(self, tmp_path) -> None:
        storage = LocalFileStorage(StorageSettings(base_path=str(tmp_path)))

        assert storage.resolve("7/notes.pdf") == tmp_path / "7" / "notes.pdf"

    def test_should_keep_absolute_path(self, tmp_path) -> None:
        storage = LocalFileStorage(StorageSettings(base_path="/srv/uploads"))
        absolute = tmp_path / "notes.txt"

        assert storage.resolve(str(absolute)) == absolute

    def test_should_default_base_from_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("STORAGE_BASE_PATH", "/data/quizgenie")

        assert LocalFileStorage().base_path == Path("/data/quizgenie")
