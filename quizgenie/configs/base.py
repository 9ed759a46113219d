"""
Shared settings base.

Every settings section reads the same .env file and ignores unknown keys;
sections only declare their own env prefix.

Dependencies: pydantic_settings
System role: Common ancestor of all QuizGenie settings sections
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings section reading from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
