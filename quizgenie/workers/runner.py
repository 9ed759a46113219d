"""
Task runner.

Maps task names to handlers, validates payloads, and executes a task inside
its own event loop with a fresh, non-pooled database engine.

Dependencies: pydantic, sqlalchemy, quizgenie.core, quizgenie.boundary
System role: Task execution contract between Celery and the pipelines
"""

import asyncio
import logging
from enum import Enum
from functools import lru_cache
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quizgenie.boundary.ai.embedding_client import EmbeddingClient
from quizgenie.boundary.ai.generation_client import GenerationClient
from quizgenie.boundary.db.connection import get_async_engine, get_async_session_factory
from quizgenie.boundary.storage.local_storage import LocalFileStorage
from quizgenie.configs import get_settings
from quizgenie.configs.pipeline import PipelineSettings
from quizgenie.core.content_processing import ContentPipeline
from quizgenie.core.exceptions import TaskPayloadError, UnknownTaskError
from quizgenie.core.quiz_generation import QuizPipeline

logger = logging.getLogger(__name__)


class TaskName(str, Enum):
    """Registered background task names."""

    PROCESS_DOCUMENT = "process_document"
    GENERATE_QUIZ = "generate_quiz"


class DocumentTaskPayload(BaseModel):
    """Payload of the process_document task."""

    document_id: int


class QuizTaskPayload(BaseModel):
    """Payload of the generate_quiz task."""

    quiz_id: int


TASK_PAYLOADS: dict[TaskName, type[BaseModel]] = {
    TaskName.PROCESS_DOCUMENT: DocumentTaskPayload,
    TaskName.GENERATE_QUIZ: QuizTaskPayload,
}

TaskHandler = Callable[[Any], Awaitable[dict]]


def validate_payload(task_name: str, payload: dict) -> BaseModel:
    """
    Validate a payload against the schema of its task.

    Args:
        task_name: Registered task name
        payload: Raw payload dict

    Returns:
        BaseModel: Validated payload model

    Raises:
        UnknownTaskError: Task name is not known
        TaskPayloadError: Payload does not match the task's schema
    """
    try:
        name = TaskName(task_name)
    except ValueError as e:
        raise UnknownTaskError(task_name) from e

    try:
        return TASK_PAYLOADS[name].model_validate(payload)
    except ValidationError as e:
        raise TaskPayloadError(
            f"Invalid payload for task {task_name}: {e.error_count()} error(s)",
            {"task_name": task_name, "errors": e.errors(include_url=False)},
        ) from e


class TaskRunner:
    """Dispatch validated task payloads to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, TaskHandler] = {}

    def register(self, task_name: str, handler: TaskHandler) -> None:
        """
        Register the handler for a task name, replacing any previous one.

        Args:
            task_name: Task name (a TaskName value)
            handler: Async callable receiving the validated payload model

        Raises:
            UnknownTaskError: Task name has no payload schema
        """
        try:
            name = TaskName(task_name)
        except ValueError as e:
            raise UnknownTaskError(task_name) from e
        self._handlers[name.value] = handler

    async def run(self, task_name: str, payload: dict) -> dict:
        """
        Validate a payload and run its task's handler.

        Args:
            task_name: Registered task name
            payload: Raw payload dict

        Returns:
            dict: Handler result

        Raises:
            UnknownTaskError: No handler registered for the task name
            TaskPayloadError: Payload failed validation
        """
        handler = self._handlers.get(task_name)
        if handler is None:
            raise UnknownTaskError(task_name)

        validated = validate_payload(task_name, payload)
        logger.info(
            f"{__name__}:run - Running task",
            extra={"task_name": task_name, "payload": validated.model_dump()},
        )
        return await handler(validated)


def build_runner(
    session_factory: async_sessionmaker[AsyncSession],
    embedder: EmbeddingClient,
    generator: GenerationClient,
    storage: LocalFileStorage,
    settings: PipelineSettings,
) -> TaskRunner:
    """
    Construct a runner with both pipelines registered.

    Args:
        session_factory: Factory for async sessions
        embedder: Embedding capability
        generator: Generation capability
        storage: Stored document resolver
        settings: Pipeline settings

    Returns:
        TaskRunner: Runner handling every TaskName
    """
    content_pipeline = ContentPipeline(
        session_factory, embedder, generator, storage, settings
    )
    quiz_pipeline = QuizPipeline(session_factory, generator, settings)

    async def handle_process_document(payload: DocumentTaskPayload) -> dict:
        result = await content_pipeline.process(payload.document_id)
        return result.model_dump()

    async def handle_generate_quiz(payload: QuizTaskPayload) -> dict:
        result = await quiz_pipeline.generate(payload.quiz_id)
        return result.model_dump()

    runner = TaskRunner()
    runner.register(TaskName.PROCESS_DOCUMENT.value, handle_process_document)
    runner.register(TaskName.GENERATE_QUIZ.value, handle_generate_quiz)
    return runner


@lru_cache
def get_ai_clients() -> tuple[EmbeddingClient, GenerationClient]:
    """
    Build the AI clients once per worker process.

    Returns:
        tuple: (embedding client, generation client)
    """
    ai_settings = get_settings().ai
    return EmbeddingClient(ai_settings), GenerationClient(ai_settings)


async def _execute(task_name: str, payload: dict) -> dict:
    settings = get_settings()
    engine = get_async_engine(pooled=False)
    try:
        embedder, generator = get_ai_clients()
        runner = build_runner(
            get_async_session_factory(engine),
            embedder,
            generator,
            LocalFileStorage(settings.storage),
            settings.pipeline,
        )
        return await runner.run(task_name, payload)
    finally:
        await engine.dispose()


def execute_task(task_name: str, payload: dict) -> dict:
    """
    Run a task to completion in a new event loop.

    Args:
        task_name: Registered task name
        payload: Raw payload dict

    Returns:
        dict: Serialized pipeline result
    """
    return asyncio.run(_execute(task_name, payload))
