"""
Content processing pipeline.

Turns a stored document into ordered, embedded text chunks.

Usage:
    from quizgenie.core.content_processing import ContentPipeline

    pipeline = ContentPipeline(session_factory, embedder, generator, storage)
    result = await pipeline.process(document_id)
"""

from quizgenie.core.content_processing.models import DocumentProcessingResult
from quizgenie.core.content_processing.pipeline import ContentPipeline
from quizgenie.core.content_processing.tasks import ChunkingTask, ExtractionTask, chunk_text

__all__ = [
    "ContentPipeline",
    "DocumentProcessingResult",
    "ChunkingTask",
    "ExtractionTask",
    "chunk_text",
]
