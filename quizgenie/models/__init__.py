"""
Domain response schemas.

Pydantic views returned by the application services.
"""

from quizgenie.models.document import DocumentStatusResponse
from quizgenie.models.quiz import (
    AnswerView,
    AttemptAnswerDetail,
    AttemptDetailsResponse,
    AttemptSummary,
    QuestionView,
    QuizStatusResponse,
)

__all__ = [
    "AnswerView",
    "AttemptAnswerDetail",
    "AttemptDetailsResponse",
    "AttemptSummary",
    "DocumentStatusResponse",
    "QuestionView",
    "QuizStatusResponse",
]
