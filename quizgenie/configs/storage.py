"""
Document storage configuration.

Dependencies: pydantic_settings
System role: Raw document storage location
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from quizgenie.configs.base import BaseSettings


class StorageSettings(BaseSettings):
    """Settings for reading uploaded documents."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    base_path: str = Field(
        default="./data/uploads",
        description="Root directory that relative storage paths resolve against",
    )
