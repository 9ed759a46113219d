"""
Application services.

Intake services persist a pending row and enqueue its background task; read
services expose status, questions, and attempt history.
"""

from quizgenie.application.services.document_service import DocumentService
from quizgenie.application.services.quiz_service import QuizService

__all__ = ["DocumentService", "QuizService"]
