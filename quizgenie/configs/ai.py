"""
AI provider configuration settings.

Settings for the embedding and generation capabilities (Google Gemini via LangChain).

Dependencies: pydantic_settings
System role: AI collaborator configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from quizgenie.configs.base import BaseSettings


class AISettings(BaseSettings):
    """Embedding and text-generation model configuration."""

    model_config = SettingsConfigDict(env_prefix="AI_")

    google_api_key: str = Field(default="", description="Google Generative AI API key")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID (supports reduced output dimensions)",
    )
    embedding_dimension: int = Field(
        default=1536,
        description="Fixed embedding vector dimension stored per chunk",
    )

    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used for quiz and bucket name generation",
    )
    temperature: float = Field(default=0.7, description="Sampling temperature")
    name_max_tokens: int = Field(default=16, description="Token cap for generated bucket names")

    max_attempts: int = Field(
        default=3,
        description="Attempts per provider call before surfacing a transient error",
    )
