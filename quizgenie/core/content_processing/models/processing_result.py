"""
Processing result model for the content pipeline.

Represents the outcome of processing a document, including degraded states
(skipped chunks, missing embeddings, unpersisted status writes).

Dependencies: pydantic
System role: Return type for ContentPipeline.process()
"""

from typing import Literal

from pydantic import BaseModel, Field, computed_field

ProcessingOutcome = Literal["completed", "failed", "not_found", "skipped"]


class DocumentProcessingResult(BaseModel):
    """Result of content pipeline execution for one document."""

    document_id: int = Field(description="Processed document identifier")
    outcome: ProcessingOutcome = Field(description="How the run ended")
    chunk_count: int = Field(default=0, description="Chunks persisted for the document")
    embedded_count: int = Field(default=0, description="Persisted chunks carrying an embedding")
    skipped_indices: list[int] = Field(
        default_factory=list,
        description="Sequence indices whose chunk row could not be stored",
    )
    failed_embedding_indices: list[int] = Field(
        default_factory=list,
        description="Sequence indices stored without an embedding",
    )
    bucket_renamed: bool = Field(default=False, description="Bucket name was generated and saved")
    status_write_failures: int = Field(default=0, description="Status writes that did not persist")
    error_message: str | None = Field(default=None, description="Failure reason when outcome is failed")
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")

    @computed_field
    @property
    def degraded(self) -> bool:
        """True when the run finished with partial data or unsaved status."""
        return bool(
            self.skipped_indices
            or self.failed_embedding_indices
            or self.status_write_failures
        )
