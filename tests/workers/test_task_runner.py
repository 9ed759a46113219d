"""
Test suite for TaskRunner, payload validation, and task execution.

System role: Verification of the task execution contract
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from quizgenie.configs.pipeline import PipelineSettings
from quizgenie.core.exceptions import TaskPayloadError, UnknownTaskError
from quizgenie.workers.runner import (
    DocumentTaskPayload,
    QuizTaskPayload,
    TaskName,
    TaskRunner,
    build_runner,
    execute_task,
    validate_payload,
)


class TestValidatePayload:
    """Test suite for validate_payload()."""

    def test_should_build_document_payload(self) -> None:
        payload = validate_payload("process_document", {"document_id": "12"})

        assert payload == DocumentTaskPayload(document_id=12)

    def test_should_build_quiz_payload(self) -> None:
        assert validate_payload("generate_quiz", {"quiz_id": 3}) == QuizTaskPayload(quiz_id=3)

    def test_should_reject_unknown_task(self) -> None:
        with pytest.raises(UnknownTaskError):
            validate_payload("send_email", {})

    @pytest.mark.parametrize("payload", [{}, {"document_id": "abc"}, {"quiz_id": 1}])
    def test_should_reject_invalid_payload(self, payload: dict) -> None:
        with pytest.raises(TaskPayloadError) as exc_info:
            validate_payload("process_document", payload)

        assert exc_info.value.details["task_name"] == "process_document"


class TestTaskRunner:
    """Test suite for TaskRunner.register() and run()."""

    async def test_should_dispatch_validated_payload_to_handler(self) -> None:
        # Arrange
        runner = TaskRunner()
        handler = AsyncMock(return_value={"outcome": "completed"})
        runner.register(TaskName.PROCESS_DOCUMENT.value, handler)

        # Act
        result = await runner.run("process_document", {"document_id": 5})

        # Assert
        assert result == {"outcome": "completed"}
        handler.assert_awaited_once_with(DocumentTaskPayload(document_id=5))

    async def test_should_raise_when_no_handler_registered(self) -> None:
        runner = TaskRunner()

        with pytest.raises(UnknownTaskError):
            await runner.run("generate_quiz", {"quiz_id": 1})

    def test_register_should_reject_unknown_task_name(self) -> None:
        with pytest.raises(UnknownTaskError):
            TaskRunner().register("resize_image", AsyncMock())

    async def test_should_not_call_handler_for_invalid_payload(self) -> None:
        # Arrange
        runner = TaskRunner()
        handler = AsyncMock()
        runner.register("generate_quiz", handler)

        # Act / Assert
        with pytest.raises(TaskPayloadError):
            await runner.run("generate_quiz", {"quiz_id": None})
        handler.assert_not_awaited()


class TestBuildRunner:
    """Test suite for build_runner()."""

    async def test_should_route_both_tasks_to_pipelines(
        self, session_factory, mock_embedder, mock_generator, storage
    ) -> None:
        # Arrange
        runner = build_runner(session_factory, mock_embedder, mock_generator, storage, PipelineSettings())

        # Act
        document_result = await runner.run("process_document", {"document_id": 41})
        quiz_result = await runner.run("generate_quiz", {"quiz_id": 42})

        # Assert
        assert document_result["outcome"] == "not_found"
        assert document_result["document_id"] == 41
        assert quiz_result["outcome"] == "not_found"
        assert quiz_result["quiz_id"] == 42


class TestExecuteTask:
    """Test suite for execute_task()."""

    def test_should_run_in_fresh_engine_and_dispose_it(self) -> None:
        # Arrange
        engine = MagicMock()
        engine.dispose = AsyncMock()
        runner = MagicMock()
        runner.run = AsyncMock(return_value={"outcome": "ready"})

        # Act
        with patch("quizgenie.workers.runner.get_async_engine", return_value=engine) as get_engine, \
                patch("quizgenie.workers.runner.get_ai_clients", return_value=(MagicMock(), MagicMock())), \
                patch("quizgenie.workers.runner.build_runner", return_value=runner):
            result = execute_task("generate_quiz", {"quiz_id": 9})

        # Assert
        assert result == {"outcome": "ready"}
        get_engine.assert_called_once_with(pooled=False)
        runner.run.assert_awaited_once_with("generate_quiz", {"quiz_id": 9})
        engine.dispose.assert_awaited_once()

    def test_should_dispose_engine_when_task_raises(self) -> None:
        # Arrange
        engine = MagicMock()
        engine.dispose = AsyncMock()
        runner = MagicMock()
        runner.run = AsyncMock(side_effect=ConnectionError("database unreachable"))

        # Act / Assert
        with patch("quizgenie.workers.runner.get_async_engine", return_value=engine), \
                patch("quizgenie.workers.runner.get_ai_clients", return_value=(MagicMock(), MagicMock())), \
                patch("quizgenie.workers.runner.build_runner", return_value=runner):
            with pytest.raises(ConnectionError):
                execute_task("process_document", {"document_id": 1})

        engine.dispose.assert_awaited_once()
