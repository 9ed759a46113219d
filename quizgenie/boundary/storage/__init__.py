"""Raw document storage access."""

from quizgenie.boundary.storage.local_storage import LocalFileStorage

__all__ = ["LocalFileStorage"]
