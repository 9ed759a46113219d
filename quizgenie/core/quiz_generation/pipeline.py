"""
Quiz pipeline orchestrator.

Gathers bucket context, asks the generation client for a quiz, validates it,
and persists all questions and answers in one transaction.

Dependencies: quizgenie.boundary, quizgenie.core.quiz_generation, quizgenie.core.status_manager
System role: Quiz generation orchestration (coordinates only)
"""

import logging
import time

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quizgenie.boundary.ai.generation_client import GenerationClient
from quizgenie.boundary.ai.quiz_schemas import GeneratedQuestion
from quizgenie.boundary.db.CRUD import chunk_crud, question_crud, quiz_crud
from quizgenie.configs.pipeline import PipelineSettings
from quizgenie.core.exceptions import GenerationError, QuizContentError
from quizgenie.core.quiz_generation.context_builder import ContextBuilder
from quizgenie.core.quiz_generation.models import QuizGenerationResult
from quizgenie.core.quiz_generation.validator import QuizContentValidator
from quizgenie.core.status_manager import StatusManager
from quizgenie.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class QuizPipeline:
    """Orchestrate quiz generation: context -> generate -> validate -> persist -> ready."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        generator: GenerationClient,
        settings: PipelineSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with injected collaborators.

        Args:
            session_factory: Factory for short-lived async sessions
            generator: Generation capability
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or PipelineSettings()
        self._session_factory = session_factory
        self._generator = generator
        self._context_builder = ContextBuilder(max_chars=self._settings.max_context_chars)
        self._status = StatusManager(session_factory)

    async def generate(self, quiz_id: int) -> QuizGenerationResult:
        """
        Generate and persist the questions of a quiz.

        A quiz whose questions were already committed by an earlier run is
        moved to ready without generating again.

        Args:
            quiz_id: ID of a persisted quiz

        Returns:
            QuizGenerationResult: Outcome of the run. Terminal failures are
                reported here, not raised.

        Raises:
            SQLAlchemyError: The quiz row could not be loaded
        """
        start_time = time.perf_counter()

        async with self._session_factory() as session:
            quiz = await quiz_crud.get_by_id(session, quiz_id)

        if quiz is None:
            logger.warning(f"{__name__}:generate - Quiz not found", extra={"quiz_id": quiz_id})
            return QuizGenerationResult(
                quiz_id=quiz_id,
                outcome="not_found",
                processing_time_ms=self._elapsed_ms(start_time),
            )

        if quiz.status.is_terminal:
            logger.info(
                f"{__name__}:generate - Quiz already terminal, skipping",
                extra={"quiz_id": quiz_id, "status": quiz.status.value},
            )
            return QuizGenerationResult(
                quiz_id=quiz_id,
                outcome="skipped",
                processing_time_ms=self._elapsed_ms(start_time),
            )

        result = QuizGenerationResult(quiz_id=quiz_id, outcome="ready")
        if not await self._status.quiz_generating(quiz_id):
            result.status_write_failures += 1

        try:
            async with self._session_factory() as session:
                existing = await question_crud.count_by_quiz_id(session, quiz_id)
                chunks = (
                    [] if existing
                    else await chunk_crud.get_by_bucket_id(session, quiz.bucket_id)
                )
        except SQLAlchemyError as e:
            return await self._fail(result, f"Failed to load quiz context: {e}", start_time)

        if existing:
            logger.info(
                f"{__name__}:generate - Questions already persisted, skipping generation",
                extra={"quiz_id": quiz_id, "question_count": existing},
            )
            result.question_count = existing
        else:
            context = self._context_builder.build([chunk.content for chunk in chunks])
            result.context_chars = len(context)

            try:
                generated = await self._generator.generate_quiz(
                    context,
                    quiz.question_count,
                    quiz.choice_count,
                    quiz.difficulty,
                )
                questions = QuizContentValidator(
                    quiz.question_count, quiz.choice_count
                ).validate(generated)
            except (GenerationError, QuizContentError) as e:
                return await self._fail(result, e.message, start_time)

            try:
                await self._persist_questions(quiz_id, questions)
            except SQLAlchemyError as e:
                return await self._fail(result, f"Failed to save questions: {e}", start_time)
            result.question_count = len(questions)

        if not await self._status.quiz_ready(quiz_id):
            result.status_write_failures += 1

        result.processing_time_ms = self._elapsed_ms(start_time)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:generate - Quiz ready",
            quiz_id=quiz_id,
            question_count=result.question_count,
            context_chars=result.context_chars,
            status_write_failures=result.status_write_failures,
            processing_time_ms=result.processing_time_ms,
        )
        return result

    async def _persist_questions(
        self,
        quiz_id: int,
        questions: list[GeneratedQuestion],
    ) -> None:
        """Insert every question and its answers, or nothing."""
        async with self._session_factory() as session:
            async with session.begin():
                for question in questions:
                    await question_crud.create_with_answers(
                        session,
                        quiz_id=quiz_id,
                        text=question.text,
                        explanation=question.explanation,
                        answers=[
                            {
                                "text": choice.text,
                                "is_correct": choice.is_correct,
                                "explanation": choice.explanation,
                            }
                            for choice in question.choices
                        ],
                    )

    async def _fail(
        self,
        result: QuizGenerationResult,
        error_message: str,
        start_time: float,
    ) -> QuizGenerationResult:
        """Write the failed status and finish the result."""
        logger.error(
            f"{__name__}:_fail - Quiz generation failed",
            extra={"quiz_id": result.quiz_id, "error": error_message},
        )
        if not await self._status.quiz_failed(result.quiz_id, error_message):
            result.status_write_failures += 1
        result.outcome = "failed"
        result.error_message = error_message
        result.processing_time_ms = self._elapsed_ms(start_time)
        return result

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return (time.perf_counter() - start_time) * 1000
