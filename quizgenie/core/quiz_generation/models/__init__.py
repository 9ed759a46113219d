"""Quiz pipeline data models."""

from quizgenie.core.quiz_generation.models.generation_result import (
    GenerationOutcome,
    QuizGenerationResult,
)

__all__ = ["GenerationOutcome", "QuizGenerationResult"]
