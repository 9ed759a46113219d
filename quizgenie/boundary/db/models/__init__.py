"""
Database models package.

Exports:
  - BucketModel: Bucket ORM model
  - DocumentModel, DocumentStatus: Document ORM model and status enum
  - ChunkModel: Chunk ORM model with embedding vector
  - QuizModel, QuizStatus, QuestionModel, AnswerModel: Quiz ORM models
  - AttemptModel, AttemptAnswerModel: Scoring ORM models

Dependencies: sqlalchemy, quizgenie.boundary.db.base
System role: Database model definitions for domain entities
"""

from quizgenie.boundary.db.models.bucket_model import BucketModel
from quizgenie.boundary.db.models.document_model import DocumentModel, DocumentStatus
from quizgenie.boundary.db.models.chunk_model import ChunkModel
from quizgenie.boundary.db.models.quiz_model import (
    AnswerModel,
    QuestionModel,
    QuizModel,
    QuizStatus,
)
from quizgenie.boundary.db.models.attempt_model import AttemptAnswerModel, AttemptModel

__all__ = [
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
