"""
Quiz, Question and Answer CRUD operations.

Provides guarded status transitions for QuizModel and the grouped
question-plus-answers insert used by quiz generation.

Dependencies: sqlalchemy, quizgenie.boundary.db.models
System role: Quiz persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quizgenie.boundary.db.models.quiz_model import (
    AnswerModel,
    QuestionModel,
    QuizModel,
    QuizStatus,
)
from quizgenie.boundary.db.CRUD.base_crud import BaseCRUD
from quizgenie.boundary.db.CRUD.document_crud import MAX_ERROR_MESSAGE_LENGTH


class QuizCRUD(BaseCRUD[QuizModel]):
    """CRUD operations for QuizModel."""

    def __init__(self) -> None:
        """Initialize QuizCRUD with QuizModel."""
        super().__init__(QuizModel)

    async def update_status(
        self,
        session: AsyncSession,
        id: int,
        status: QuizStatus,
        error_message: str | None = None,
    ) -> QuizModel | None:
        """
        Move a quiz to a new status if the current status allows it.

        Args:
            session: Async database session
            id: Quiz ID
            status: New quiz status
            error_message: Error details when status is FAILED

        Returns:
            Updated QuizModel, or None if missing or the transition is not allowed
        """
        values: dict = {"status": status}
        if error_message is not None:
            values["error_message"] = error_message[:MAX_ERROR_MESSAGE_LENGTH]
        stmt = (
            update(QuizModel)
            .where(QuizModel.id == id)
            .where(QuizModel.status.in_(status.predecessors()))
            .values(**values)
            .returning(QuizModel)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_generating(self, session: AsyncSession, id: int) -> QuizModel | None:
        """Mark quiz as generating."""
        return await self.update_status(session, id, QuizStatus.GENERATING)

    async def mark_ready(self, session: AsyncSession, id: int) -> QuizModel | None:
        """Mark quiz as ready."""
        return await self.update_status(session, id, QuizStatus.READY)

    async def mark_failed(
        self,
        session: AsyncSession,
        id: int,
        error_message: str,
    ) -> QuizModel | None:
        """Mark quiz as failed with error details."""
        return await self.update_status(session, id, QuizStatus.FAILED, error_message)


class QuestionCRUD(BaseCRUD[QuestionModel]):
    """CRUD operations for QuestionModel and its answers."""

    def __init__(self) -> None:
        """Initialize QuestionCRUD with QuestionModel."""
        super().__init__(QuestionModel)

    async def create_with_answers(
        self,
        session: AsyncSession,
        quiz_id: int,
        text: str,
        explanation: str,
        answers: list[dict],
    ) -> QuestionModel:
        """
        Create one question together with its answers.

        Args:
            session: Async database session (caller owns the transaction)
            quiz_id: Owning quiz ID
            text: Question text
            explanation: Question-level explanation
            answers: Dicts with text, is_correct and explanation keys

        Returns:
            Created QuestionModel
        """
        question = await self.create(
            session,
            quiz_id=quiz_id,
            text=text,
            explanation=explanation,
        )
        for answer in answers:
            session.add(AnswerModel(question_id=question.id, **answer))
        await session.flush()
        return question

    async def count_by_quiz_id(self, session: AsyncSession, quiz_id: int) -> int:
        """
        Count the questions persisted for a quiz.

        Args:
            session: Async database session
            quiz_id: Quiz ID

        Returns:
            int: Number of questions
        """
        stmt = select(func.count(QuestionModel.id)).where(QuestionModel.quiz_id == quiz_id)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def get_by_quiz_id(
        self,
        session: AsyncSession,
        quiz_id: int,
    ) -> Sequence[QuestionModel]:
        """
        Retrieve a quiz's questions with their answers loaded.

        Args:
            session: Async database session
            quiz_id: Quiz ID

        Returns:
            Sequence of QuestionModels in creation order
        """
        stmt = (
            select(QuestionModel)
            .where(QuestionModel.quiz_id == quiz_id)
            .options(selectinload(QuestionModel.answers))
            .order_by(QuestionModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class AnswerCRUD(BaseCRUD[AnswerModel]):
    """CRUD operations for AnswerModel."""

    def __init__(self) -> None:
        """Initialize AnswerCRUD with AnswerModel."""
        super().__init__(AnswerModel)

    async def get_for_question(
        self,
        session: AsyncSession,
        quiz_id: int,
        question_id: int,
        answer_id: int,
    ) -> AnswerModel | None:
        """
        Look up an answer that belongs to the given question of the given quiz.

        Args:
            session: Async database session
            quiz_id: Quiz ID
            question_id: Question ID
            answer_id: Answer ID

        Returns:
            AnswerModel if the triple matches, None otherwise
        """
        stmt = (
            select(AnswerModel)
            .join(QuestionModel, QuestionModel.id == AnswerModel.question_id)
            .where(
                AnswerModel.id == answer_id,
                AnswerModel.question_id == question_id,
                QuestionModel.quiz_id == quiz_id,
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


quiz_crud = QuizCRUD()
question_crud = QuestionCRUD()
answer_crud = AnswerCRUD()
