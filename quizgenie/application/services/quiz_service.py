"""
Quiz service orchestrator.

Creates quizzes for background generation, serves questions to quiz takers,
scores submissions, and exposes attempt history.

Dependencies: quizgenie.boundary.db, quizgenie.core.scoring, quizgenie.workers
System role: Quiz intake, read, and attempt orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from quizgenie.boundary.db.connection import get_async_session_factory
from quizgenie.boundary.db.CRUD import attempt_crud, bucket_crud, question_crud, quiz_crud
from quizgenie.boundary.db.models.quiz_model import QuizModel, QuizStatus
from quizgenie.configs import get_settings
from quizgenie.core.exceptions import (
    AttemptAccessError,
    AttemptNotFoundError,
    NotFoundError,
    QuizNotFoundError,
    QuizNotReadyError,
)
from quizgenie.core.scoring import AttemptResult, ScoringEngine, SubmittedAnswer
from quizgenie.models.quiz import (
    AnswerView,
    AttemptAnswerDetail,
    AttemptDetailsResponse,
    AttemptSummary,
    QuestionView,
    QuizStatusResponse,
)
from quizgenie.workers.dispatcher import TaskDispatcher
from quizgenie.workers.runner import TaskName

logger = logging.getLogger(__name__)


class QuizService:
    """
    Quiz service orchestrator.

    Generation runs in workers; this service only creates the pending quiz,
    enqueues it, and reads results once the quiz is ready.
    """

    def __init__(
        self,
        db: AsyncSession,
        dispatcher: TaskDispatcher | None = None,
        scoring_engine: ScoringEngine | None = None,
    ) -> None:
        """
        Initialize quiz service.

        Args:
            db: AsyncSession for quiz reads and creation
            dispatcher: Optional task dispatcher (created if None)
            scoring_engine: Optional scoring engine (bound to db's engine if None)
        """
        self.db = db
        self._dispatcher = dispatcher
        self._scoring_engine = scoring_engine

    @property
    def dispatcher(self) -> TaskDispatcher:
        """Lazy-load dispatcher."""
        if self._dispatcher is None:
            self._dispatcher = TaskDispatcher()
        return self._dispatcher

    @property
    def scoring_engine(self) -> ScoringEngine:
        """Lazy-load scoring engine on the engine this service's session uses."""
        if self._scoring_engine is None:
            self._scoring_engine = ScoringEngine(get_async_session_factory(self.db.bind))
        return self._scoring_engine

    async def create_quiz(
        self,
        bucket_id: int,
        timed_mode: bool = False,
        practice_mode: bool = False,
        question_count: int | None = None,
        choice_count: int | None = None,
        difficulty: str | None = None,
    ) -> QuizModel:
        """
        Create a pending quiz and enqueue its generation.

        Args:
            bucket_id: Bucket whose documents supply the material
            timed_mode: Quiz is taken against a timer
            practice_mode: Reveal correctness and explanations to takers
            question_count: Questions requested (configured default if None)
            choice_count: Choices per question (configured default if None)
            difficulty: Difficulty label (configured default if None)

        Returns:
            QuizModel: Created quiz with PENDING status

        Raises:
            NotFoundError: Bucket does not exist
            ValueError: question_count < 1 or choice_count < 2
        """
        defaults = get_settings().pipeline
        if question_count is None:
            question_count = defaults.default_question_count
        if choice_count is None:
            choice_count = defaults.default_choice_count
        if question_count < 1:
            raise ValueError(f"question_count must be at least 1, got {question_count}")
        if choice_count < 2:
            raise ValueError(f"choice_count must be at least 2, got {choice_count}")

        bucket = await bucket_crud.get_by_id(self.db, bucket_id)
        if bucket is None:
            raise NotFoundError("bucket", bucket_id)

        quiz = await quiz_crud.create(
            self.db,
            bucket_id=bucket_id,
            status=QuizStatus.PENDING,
            timed_mode=timed_mode,
            practice_mode=practice_mode,
            question_count=question_count,
            choice_count=choice_count,
            difficulty=difficulty or defaults.default_difficulty,
        )
        await self.db.commit()

        task_id = self.dispatcher.enqueue(TaskName.GENERATE_QUIZ.value, {"quiz_id": quiz.id})
        if task_id is None:
            logger.warning(
                f"{__name__}:create_quiz - Quiz created but not enqueued",
                extra={"quiz_id": quiz.id},
            )
        return quiz

    async def _get_quiz(self, quiz_id: int) -> QuizModel:
        quiz = await quiz_crud.get_by_id(self.db, quiz_id)
        if quiz is None:
            raise QuizNotFoundError(quiz_id)
        return quiz

    async def get_quiz_status(self, quiz_id: int) -> QuizStatusResponse:
        """
        Get a quiz's generation status.

        Raises:
            QuizNotFoundError: Quiz does not exist
        """
        return QuizStatusResponse.model_validate(await self._get_quiz(quiz_id))

    async def get_quiz_questions(self, quiz_id: int) -> list[QuestionView]:
        """
        Get the questions of a ready quiz.

        Correctness flags and explanations are included only for practice
        mode quizzes.

        Args:
            quiz_id: Quiz ID

        Returns:
            list[QuestionView]: Questions with their answer choices

        Raises:
            QuizNotFoundError: Quiz does not exist
            QuizNotReadyError: Quiz is not ready
        """
        quiz = await self._get_quiz(quiz_id)
        if quiz.status != QuizStatus.READY:
            raise QuizNotReadyError(quiz_id, quiz.status.value)

        reveal = quiz.practice_mode
        questions = await question_crud.get_by_quiz_id(self.db, quiz_id)
        return [
            QuestionView(
                id=question.id,
                text=question.text,
                explanation=question.explanation if reveal else None,
                answers=[
                    AnswerView(
                        id=answer.id,
                        text=answer.text,
                        is_correct=answer.is_correct if reveal else None,
                        explanation=answer.explanation if reveal else None,
                    )
                    for answer in question.answers
                ],
            )
            for question in questions
        ]

    async def submit_attempt(
        self,
        quiz_id: int,
        user_id: int,
        answers: list[SubmittedAnswer],
    ) -> AttemptResult:
        """
        Score a submission.

        Raises:
            QuizNotFoundError: Quiz does not exist
            QuizNotReadyError: Quiz is not ready
        """
        return await self.scoring_engine.submit(quiz_id, user_id, answers)

    async def list_attempts(self, bucket_id: int, user_id: int) -> list[AttemptSummary]:
        """List a user's attempts on the quizzes of a bucket."""
        attempts = await attempt_crud.get_by_bucket_and_user(self.db, bucket_id, user_id)
        return [AttemptSummary.model_validate(attempt) for attempt in attempts]

    async def get_attempt_details(
        self,
        attempt_id: int,
        user_id: int,
    ) -> AttemptDetailsResponse:
        """
        Get an attempt with per-question detail.

        Args:
            attempt_id: Attempt ID
            user_id: Requesting user

        Returns:
            AttemptDetailsResponse: Selected and correct answers per question

        Raises:
            AttemptNotFoundError: Attempt does not exist
            AttemptAccessError: Attempt belongs to another user
        """
        attempt = await attempt_crud.get_by_id(self.db, attempt_id)
        if attempt is None:
            raise AttemptNotFoundError(attempt_id)
        if attempt.user_id != user_id:
            raise AttemptAccessError(
                "Attempt belongs to another user",
                {"attempt_id": attempt_id, "user_id": user_id},
            )

        rows = await attempt_crud.get_details(self.db, attempt_id)
        details = []
        for attempt_answer, question, selected in rows:
            correct = next((a for a in question.answers if a.is_correct), None)
            details.append(
                AttemptAnswerDetail(
                    question_id=question.id,
                    question_text=question.text,
                    selected_answer_id=selected.id,
                    selected_answer_text=selected.text,
                    is_correct=attempt_answer.is_correct,
                    correct_answer_text=correct.text if correct else None,
                    explanation=question.explanation,
                )
            )

        return AttemptDetailsResponse(
            attempt_id=attempt.id,
            quiz_id=attempt.quiz_id,
            score=attempt.score,
            answers=details,
        )
