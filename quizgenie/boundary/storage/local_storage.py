"""
Local file storage resolver.

Uploads are written by the intake layer; the processing core only reads them.
Relative storage paths resolve against the configured base directory.

Dependencies: pathlib (stdlib), quizgenie.configs
System role: Read access to stored document files
"""

from pathlib import Path

from quizgenie.configs.storage import StorageSettings


class LocalFileStorage:
    """Resolve document storage paths to files on local disk."""

    def __init__(self, settings: StorageSettings | None = None) -> None:
        """
        Initialize storage resolver.

        Args:
            settings: Storage settings (uses environment defaults if None)
        """
        self._base_path = Path((settings or StorageSettings()).base_path)

    @property
    def base_path(self) -> Path:
        return self._base_path

    def resolve(self, storage_path: str) -> Path:
        """
        Resolve a stored document path.

        Args:
            storage_path: Absolute path, or path relative to the base directory

        Returns:
            Path: Location of the stored file (not checked for existence)
        """
        path = Path(storage_path)
        if path.is_absolute():
            return path
        return self._base_path / path
