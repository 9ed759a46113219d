"""
Generation result model for the quiz pipeline.

Dependencies: pydantic
System role: Return type for QuizPipeline.generate()
"""

from typing import Literal

from pydantic import BaseModel, Field

GenerationOutcome = Literal["ready", "failed", "not_found", "skipped"]


class QuizGenerationResult(BaseModel):
    """Result of quiz pipeline execution for one quiz."""

    quiz_id: int = Field(description="Generated quiz identifier")
    outcome: GenerationOutcome = Field(description="How the run ended")
    question_count: int = Field(default=0, description="Questions persisted for the quiz")
    context_chars: int = Field(default=0, description="Length of the context sent for generation")
    status_write_failures: int = Field(default=0, description="Status writes that did not persist")
    error_message: str | None = Field(default=None, description="Failure reason when outcome is failed")
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")
