"""Content pipeline data models."""

from quizgenie.core.content_processing.models.processing_result import (
    DocumentProcessingResult,
    ProcessingOutcome,
)

__all__ = ["DocumentProcessingResult", "ProcessingOutcome"]
