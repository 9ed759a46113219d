"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - Domain models and status enums

Dependencies: sqlalchemy, pgvector, quizgenie.configs
System role: Database adapter providing persistent storage for buckets,
documents, chunks, quizzes, and attempts.
"""

from quizgenie.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from quizgenie.boundary.db.connection import get_async_engine, get_async_session_factory
from quizgenie.boundary.db.models import (
    AnswerModel,
    AttemptAnswerModel,
    AttemptModel,
    BucketModel,
    ChunkModel,
    DocumentModel,
    DocumentStatus,
    QuestionModel,
    QuizModel,
    QuizStatus,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "BucketModel",
    "DocumentModel",
    "DocumentStatus",
    "ChunkModel",
    "QuizModel",
    "QuizStatus",
    "QuestionModel",
    "AnswerModel",
    "AttemptModel",
    "AttemptAnswerModel",
]
