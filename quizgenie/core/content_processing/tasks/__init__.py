"""Content pipeline task modules."""

from quizgenie.core.content_processing.tasks.chunking_task import ChunkingTask, chunk_text
from quizgenie.core.content_processing.tasks.extraction_task import ExtractionTask

__all__ = ["ChunkingTask", "ExtractionTask", "chunk_text"]
