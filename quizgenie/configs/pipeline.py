"""
Configuration settings for the content and quiz pipelines.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from quizgenie.configs.base import BaseSettings


class PipelineSettings(BaseSettings):
    """Settings for content processing and quiz generation."""

    model_config = SettingsConfigDict(env_prefix="PIPELINE_")

    # Chunking settings
    chunk_size: int = Field(
        default=2000,
        description="Maximum chunk size in characters",
    )

    # Bucket auto-naming
    bucket_name_sample_chunks: int = Field(
        default=3,
        description="Leading chunks sampled for bucket name generation",
    )

    # Quiz generation
    max_context_chars: int = Field(
        default=12000,
        description="Character budget for quiz generation context",
    )
    default_question_count: int = Field(default=10, description="Questions per quiz")
    default_choice_count: int = Field(default=4, description="Answer choices per question")
    default_difficulty: str = Field(default="medium", description="Quiz difficulty label")
