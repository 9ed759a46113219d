"""
Task dispatcher.

Fire-and-forget enqueueing of background tasks through Celery. Enqueue
failures are logged and reported as None; the caller's request still
succeeds and the entity stays pending.

Dependencies: celery, kombu, quizgenie.workers
System role: Producer side of the task queue
"""

import logging

from celery import Celery
from celery.exceptions import CeleryError
from kombu.exceptions import KombuError

from quizgenie.core.exceptions import TaskError
from quizgenie.workers.celery_app import celery_app
from quizgenie.workers.runner import validate_payload

logger = logging.getLogger(__name__)


class TaskDispatcher:
    """Enqueue background tasks by name."""

    def __init__(self, app: Celery | None = None) -> None:
        """
        Initialize dispatcher.

        Args:
            app: Celery application (module app if None)
        """
        self._app = app or celery_app

    def enqueue(self, task_name: str, payload: dict) -> str | None:
        """
        Enqueue a task.

        Args:
            task_name: Registered task name
            payload: Task payload, e.g. {"document_id": 1}

        Returns:
            str | None: Task ID, or None if the task could not be enqueued
        """
        try:
            validated = validate_payload(task_name, payload)
            async_result = self._app.send_task(task_name, kwargs=validated.model_dump())
        except (TaskError, CeleryError, KombuError, OSError) as e:
            logger.error(
                f"{__name__}:enqueue - Failed to enqueue task",
                extra={
                    "task_name": task_name,
                    "payload": payload,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            return None

        logger.info(
            f"{__name__}:enqueue - Task enqueued",
            extra={"task_name": task_name, "task_id": async_result.id},
        )
        return async_result.id
