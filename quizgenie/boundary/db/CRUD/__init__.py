"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from quizgenie.boundary.db.CRUD import document_crud, chunk_crud

    document = await document_crud.get_by_id(db, document_id)
"""

from quizgenie.boundary.db.CRUD.base_crud import BaseCRUD
from quizgenie.boundary.db.CRUD.bucket_crud import BucketCRUD, bucket_crud
from quizgenie.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from quizgenie.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from quizgenie.boundary.db.CRUD.quiz_crud import (
    AnswerCRUD,
    QuestionCRUD,
    QuizCRUD,
    answer_crud,
    question_crud,
    quiz_crud,
)
from quizgenie.boundary.db.CRUD.attempt_crud import AttemptCRUD, attempt_crud

__all__ = [
    "BaseCRUD",
    "BucketCRUD",
    "bucket_crud",
    "DocumentCRUD",
    "document_crud",
    "ChunkCRUD",
    "chunk_crud",
    "QuizCRUD",
    "quiz_crud",
    "QuestionCRUD",
    "question_crud",
    "AnswerCRUD",
    "answer_crud",
    "AttemptCRUD",
    "attempt_crud",
]
