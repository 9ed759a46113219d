"""
Attempt CRUD operations.

Dependencies: sqlalchemy, quizgenie.boundary.db.models
System role: Scoring persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quizgenie.boundary.db.models.attempt_model import AttemptAnswerModel, AttemptModel
from quizgenie.boundary.db.models.quiz_model import AnswerModel, QuestionModel, QuizModel
from quizgenie.boundary.db.CRUD.base_crud import BaseCRUD


class AttemptCRUD(BaseCRUD[AttemptModel]):
    """CRUD operations for AttemptModel and its audit rows."""

    def __init__(self) -> None:
        """Initialize AttemptCRUD with AttemptModel."""
        super().__init__(AttemptModel)

    async def record_answer(
        self,
        session: AsyncSession,
        attempt_id: int,
        question_id: int,
        answer_id: int,
        is_correct: bool,
    ) -> AttemptAnswerModel:
        """
        Record the answer selected for one question of an attempt.

        Args:
            session: Async database session
            attempt_id: Attempt ID
            question_id: Question ID
            answer_id: Selected answer ID
            is_correct: Correctness flag copied from the answer

        Returns:
            Created AttemptAnswerModel
        """
        row = AttemptAnswerModel(
            attempt_id=attempt_id,
            question_id=question_id,
            answer_id=answer_id,
            is_correct=is_correct,
        )
        session.add(row)
        await session.flush()
        return row

    async def get_by_bucket_and_user(
        self,
        session: AsyncSession,
        bucket_id: int,
        user_id: int,
    ) -> Sequence[AttemptModel]:
        """
        Retrieve a user's attempts on the quizzes of a bucket.

        Args:
            session: Async database session
            bucket_id: Bucket ID
            user_id: User ID

        Returns:
            Sequence of AttemptModels, oldest first
        """
        stmt = (
            select(AttemptModel)
            .join(QuizModel, QuizModel.id == AttemptModel.quiz_id)
            .where(QuizModel.bucket_id == bucket_id, AttemptModel.user_id == user_id)
            .order_by(AttemptModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_details(
        self,
        session: AsyncSession,
        attempt_id: int,
    ) -> list[tuple[AttemptAnswerModel, QuestionModel, AnswerModel]]:
        """
        Retrieve an attempt's answers joined with their question and selected answer.

        Args:
            session: Async database session
            attempt_id: Attempt ID

        Returns:
            list of (attempt answer, question, selected answer) tuples
        """
        stmt = (
            select(AttemptAnswerModel, QuestionModel, AnswerModel)
            .join(QuestionModel, QuestionModel.id == AttemptAnswerModel.question_id)
            .join(AnswerModel, AnswerModel.id == AttemptAnswerModel.answer_id)
            .where(AttemptAnswerModel.attempt_id == attempt_id)
            .options(selectinload(QuestionModel.answers))
            .order_by(AttemptAnswerModel.id)
        )
        result = await session.execute(stmt)
        return [tuple(row) for row in result.all()]


attempt_crud = AttemptCRUD()
