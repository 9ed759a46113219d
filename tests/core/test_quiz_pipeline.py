"""
Test suite for QuizPipeline.

System role: Verification of quiz generation orchestration
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError

from quizgenie.boundary.db.CRUD import chunk_crud, question_crud
from quizgenie.boundary.db.models import (
    AnswerModel,
    DocumentStatus,
    QuestionModel,
    QuizModel,
    QuizStatus,
)
from quizgenie.configs.pipeline import PipelineSettings
from quizgenie.core.exceptions import GenerationError
from quizgenie.core.quiz_generation import QuizPipeline

from factories import add_document, add_quiz, make_generated_quiz


@pytest.fixture
def pipeline(session_factory, mock_generator) -> QuizPipeline:
    return QuizPipeline(session_factory, mock_generator, PipelineSettings(max_context_chars=12000))


async def load_quiz(session_factory, quiz_id: int) -> QuizModel:
    async with session_factory() as session:
        return await session.get(QuizModel, quiz_id)


async def count_questions(session_factory, quiz_id: int) -> int:
    async with session_factory() as session:
        result = await session.execute(
            select(func.count(QuestionModel.id)).where(QuestionModel.quiz_id == quiz_id)
        )
        return result.scalar_one()


class TestQuizPipelineSuccess:
    """Quizzes that reach ready."""

    async def test_should_persist_validated_questions(
        self, pipeline, session_factory, bucket, mock_generator
    ) -> None:
        # Arrange
        await add_document(
            session_factory,
            bucket.id,
            status=DocumentStatus.COMPLETED,
            chunks=["Photosynthesis converts light.", "Chlorophyll absorbs red light."],
        )
        quiz_id = await add_quiz(session_factory, bucket.id, question_count=2)
        mock_generator.generate_quiz = AsyncMock(return_value=make_generated_quiz(3))

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "ready"
        assert result.question_count == 2
        mock_generator.generate_quiz.assert_awaited_once_with(
            "Photosynthesis converts light.\n\nChlorophyll absorbs red light.",
            2,
            4,
            "medium",
        )
        assert (await load_quiz(session_factory, quiz_id)).status == QuizStatus.READY

        async with session_factory() as session:
            questions = await question_crud.get_by_quiz_id(session, quiz_id)
        assert len(questions) == 2
        for question in questions:
            assert len(question.answers) == 4
            assert sum(answer.is_correct for answer in question.answers) == 1

    async def test_should_ignore_chunks_of_unfinished_documents(
        self, pipeline, session_factory, bucket, mock_generator
    ) -> None:
        # Arrange
        await add_document(
            session_factory, bucket.id, status=DocumentStatus.PROCESSING, chunks=["draft"]
        )
        quiz_id = await add_quiz(session_factory, bucket.id)

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.context_chars == 0
        assert mock_generator.generate_quiz.await_args.args[0] == ""

    async def test_should_generate_from_empty_bucket(
        self, pipeline, session_factory, bucket, mock_generator
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id)

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "ready"
        mock_generator.generate_quiz.assert_awaited_once()

    async def test_should_finish_quiz_whose_questions_already_exist(
        self, pipeline, session_factory, bucket, mock_generator
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id, status=QuizStatus.GENERATING)
        async with session_factory() as session:
            await question_crud.create_with_answers(
                session,
                quiz_id=quiz_id,
                text="Saved earlier?",
                explanation="",
                answers=[
                    {"text": "Yes", "is_correct": True, "explanation": ""},
                    {"text": "No", "is_correct": False, "explanation": ""},
                ],
            )
            await session.commit()

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "ready"
        assert result.question_count == 1
        mock_generator.generate_quiz.assert_not_awaited()
        assert await count_questions(session_factory, quiz_id) == 1
        assert (await load_quiz(session_factory, quiz_id)).status == QuizStatus.READY


class TestQuizPipelineFailure:
    """Terminal failures and no-op runs."""

    async def test_should_fail_on_invalid_content_without_writing_rows(
        self, pipeline, session_factory, bucket, mock_generator
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id)
        generated = make_generated_quiz(2)
        generated.questions[0].choices[1].is_correct = True
        mock_generator.generate_quiz = AsyncMock(return_value=generated)

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "failed"
        assert "2 correct choices" in result.error_message
        quiz = await load_quiz(session_factory, quiz_id)
        assert quiz.status == QuizStatus.FAILED
        assert quiz.error_message == result.error_message
        assert await count_questions(session_factory, quiz_id) == 0

    async def test_should_fail_on_generation_error(
        self, pipeline, session_factory, bucket, mock_generator
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id)
        mock_generator.generate_quiz = AsyncMock(side_effect=GenerationError("Quiz generation failed: 503"))

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "failed"
        quiz = await load_quiz(session_factory, quiz_id)
        assert quiz.status == QuizStatus.FAILED
        assert quiz.error_message == "Quiz generation failed: 503"

    @pytest.mark.parametrize(
        ("crud", "method"),
        [(question_crud, "count_by_quiz_id"), (chunk_crud, "get_by_bucket_id")],
    )
    async def test_should_fail_quiz_when_context_read_fails(
        self, pipeline, session_factory, bucket, mock_generator, crud, method
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id)
        failing = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))

        # Act
        with patch.object(crud, method, failing):
            result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "failed"
        assert result.error_message.startswith("Failed to load quiz context")
        mock_generator.generate_quiz.assert_not_awaited()
        quiz = await load_quiz(session_factory, quiz_id)
        assert quiz.status == QuizStatus.FAILED
        assert quiz.error_message == result.error_message

    async def test_should_roll_back_partial_question_insert(
        self, pipeline, session_factory, bucket
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id, question_count=2)
        original = question_crud.create_with_answers
        calls = 0

        async def fail_on_second(*args, **kwargs):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise IntegrityError("INSERT INTO questions", {}, Exception("constraint"))
            return await original(*args, **kwargs)

        # Act
        with patch.object(question_crud, "create_with_answers", fail_on_second):
            result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "failed"
        assert result.error_message.startswith("Failed to save questions")
        assert await count_questions(session_factory, quiz_id) == 0
        async with session_factory() as session:
            answers = await session.execute(select(func.count(AnswerModel.id)))
            assert answers.scalar_one() == 0
        assert (await load_quiz(session_factory, quiz_id)).status == QuizStatus.FAILED

    @pytest.mark.parametrize("status", [QuizStatus.READY, QuizStatus.FAILED])
    async def test_should_skip_terminal_quiz(
        self, pipeline, session_factory, bucket, mock_generator, status
    ) -> None:
        # Arrange
        quiz_id = await add_quiz(session_factory, bucket.id, status=status)

        # Act
        result = await pipeline.generate(quiz_id)

        # Assert
        assert result.outcome == "skipped"
        mock_generator.generate_quiz.assert_not_awaited()
        assert (await load_quiz(session_factory, quiz_id)).status == status

    async def test_should_report_missing_quiz(self, pipeline, mock_generator) -> None:
        result = await pipeline.generate(12345)

        assert result.outcome == "not_found"
        mock_generator.generate_quiz.assert_not_awaited()
