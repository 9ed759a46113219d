"""
Quiz generation pipeline.

Usage:
    from quizgenie.core.quiz_generation import QuizPipeline

    pipeline = QuizPipeline(session_factory, generator)
    result = await pipeline.generate(quiz_id)
"""

from quizgenie.core.quiz_generation.context_builder import ContextBuilder, build_context
from quizgenie.core.quiz_generation.models import QuizGenerationResult
from quizgenie.core.quiz_generation.pipeline import QuizPipeline
from quizgenie.core.quiz_generation.validator import QuizContentValidator

__all__ = [
    "ContextBuilder",
    "QuizContentValidator",
    "QuizGenerationResult",
    "QuizPipeline",
    "build_context",
]
