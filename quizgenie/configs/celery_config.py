"""
Celery configuration settings.

Redis broker and result backend locations, the worker pool shape, and the
retry policy applied to content processing and quiz generation tasks.

Dependencies: pydantic, pydantic_settings
System role: Background task queue configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from quizgenie.configs.base import BaseSettings


class CelerySettings(BaseSettings):
    """Celery over Redis configuration."""

    model_config = SettingsConfigDict(env_prefix="CELERY_")

    redis_host: str = Field(default="localhost", description="Redis host for broker and results")
    redis_port: int = Field(default=6379, description="Redis port")
    broker_db: int = Field(default=0, description="Redis database holding the task queue")
    result_db: int = Field(default=1, description="Redis database holding task results")

    serializer: str = Field(default="json", description="Task and result serialization format")
    timezone: str = Field(default="UTC", description="Celery timezone")

    # Worker pool: one task per slot
    worker_concurrency: int = Field(default=5, description="Concurrent task slots per worker")
    worker_prefetch_multiplier: int = Field(default=1, description="Messages reserved per slot")

    # Retries for infrastructure failures
    task_max_retries: int = Field(default=3, description="Retries before a task is given up")
    task_retry_backoff: int = Field(default=60, description="Backoff base in seconds")
    task_retry_backoff_max: int = Field(default=600, description="Backoff cap in seconds")

    @property
    def broker_url(self) -> str:
        """Redis URL of the task queue."""
        return f"redis://{self.redis_host}:{self.redis_port}/{self.broker_db}"

    @property
    def result_backend_url(self) -> str:
        """Redis URL of the result store."""
        return f"redis://{self.redis_host}:{self.redis_port}/{self.result_db}"
