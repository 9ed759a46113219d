"""
Scoring engine for quiz attempts.

Records an attempt, audits every submitted answer, and computes the score as
the percentage of submitted pairs answered correctly.

Dependencies: sqlalchemy, pydantic, quizgenie.boundary.db.CRUD
System role: Attempt scoring
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quizgenie.boundary.db.CRUD import answer_crud, attempt_crud, quiz_crud
from quizgenie.boundary.db.models.quiz_model import QuizStatus
from quizgenie.core.exceptions import QuizNotFoundError, QuizNotReadyError

logger = logging.getLogger(__name__)


class SubmittedAnswer(BaseModel):
    """One (question, selected answer) pair of a submission."""

    question_id: int
    answer_id: int


class AttemptResult(BaseModel):
    """Outcome of scoring one submission."""

    attempt_id: int = Field(description="Created attempt identifier")
    score: float = Field(description="Percentage correct, rounded to 2 decimals")
    correct_count: int = Field(description="Recorded answers that were correct")
    submitted_count: int = Field(description="Pairs submitted, including unresolved ones")
    recorded_count: int = Field(description="Pairs recorded in the audit trail")


def compute_score(correct_count: int, submitted_count: int) -> float:
    """
    Percentage of submitted answers that were correct.

    Args:
        correct_count: Correct answers
        submitted_count: Answers submitted

    Returns:
        float: Score in [0, 100], rounded half-up to 2 decimals; 0.0 when
            nothing was submitted
    """
    if submitted_count <= 0:
        return 0.0
    score = Decimal(correct_count) * 100 / Decimal(submitted_count)
    return float(score.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class ScoringEngine:
    """Score quiz submissions and persist the attempt with its answers."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize scoring engine.

        Args:
            session_factory: Factory for async sessions
        """
        self._session_factory = session_factory

    async def submit(
        self,
        quiz_id: int,
        user_id: int,
        answers: list[SubmittedAnswer],
    ) -> AttemptResult:
        """
        Score a submission.

        Pairs whose answer does not belong to the question (or the question
        to the quiz) are not recorded but still count toward the denominator.

        Args:
            quiz_id: Quiz being attempted
            user_id: Submitting user
            answers: Submitted (question_id, answer_id) pairs

        Returns:
            AttemptResult: Created attempt and its score

        Raises:
            QuizNotFoundError: Quiz does not exist
            QuizNotReadyError: Quiz is not ready
            SQLAlchemyError: Persistence failed; nothing is saved
        """
        async with self._session_factory() as session:
            async with session.begin():
                quiz = await quiz_crud.get_by_id(session, quiz_id)
                if quiz is None:
                    raise QuizNotFoundError(quiz_id)
                if quiz.status != QuizStatus.READY:
                    raise QuizNotReadyError(quiz_id, quiz.status.value)

                attempt = await attempt_crud.create(
                    session, quiz_id=quiz_id, user_id=user_id, score=0.0
                )

                correct_count = 0
                recorded_count = 0
                for pair in answers:
                    answer = await answer_crud.get_for_question(
                        session, quiz_id, pair.question_id, pair.answer_id
                    )
                    if answer is None:
                        logger.debug(
                            f"{__name__}:submit - Answer does not match question, skipping",
                            extra={
                                "attempt_id": attempt.id,
                                "question_id": pair.question_id,
                                "answer_id": pair.answer_id,
                            },
                        )
                        continue

                    await attempt_crud.record_answer(
                        session,
                        attempt_id=attempt.id,
                        question_id=pair.question_id,
                        answer_id=pair.answer_id,
                        is_correct=answer.is_correct,
                    )
                    recorded_count += 1
                    if answer.is_correct:
                        correct_count += 1

                score = compute_score(correct_count, len(answers))
                attempt.score = score
                await session.flush()

        logger.info(
            f"{__name__}:submit - Attempt scored",
            extra={
                "attempt_id": attempt.id,
                "quiz_id": quiz_id,
                "user_id": user_id,
                "score": score,
                "submitted": len(answers),
                "recorded": recorded_count,
            },
        )
        return AttemptResult(
            attempt_id=attempt.id,
            score=score,
            correct_count=correct_count,
            submitted_count=len(answers),
            recorded_count=recorded_count,
        )
