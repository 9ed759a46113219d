"""
Unified application settings.

One section per concern, each with its own env prefix:
POSTGRES_, CELERY_, AI_, PIPELINE_, STORAGE_. LOG_LEVEL is read unprefixed.

Dependencies: All config modules
System role: Central configuration aggregator
"""

from functools import lru_cache

from pydantic import Field

from quizgenie.configs.ai import AISettings
from quizgenie.configs.base import BaseSettings
from quizgenie.configs.celery_config import CelerySettings
from quizgenie.configs.database import DatabaseSettings
from quizgenie.configs.pipeline import PipelineSettings
from quizgenie.configs.storage import StorageSettings


class Settings(BaseSettings):
    """All QuizGenie settings sections."""

    log_level: str = Field(default="INFO", description="Root log level for worker processes")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    celery: CelerySettings = Field(default_factory=CelerySettings)
    ai: AISettings = Field(default_factory=AISettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get the process-wide settings.

    The environment is read on first call only.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()
