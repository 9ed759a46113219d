"""
Embedding client using Google Generative AI embeddings.

Produces one fixed-dimension vector per chunk of text. The dimension is passed
on every call because the underlying LangChain class does not apply a
constructor-level output dimension to query embeddings.

Dependencies: langchain_google_genai, tenacity
System role: Embedding capability for the content pipeline
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from quizgenie.configs.ai import AISettings
from quizgenie.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Async text embedding with retries and dimension checking."""

    def __init__(
        self,
        settings: AISettings,
        embeddings: GoogleGenerativeAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize embedding client.

        Args:
            settings: AI provider settings (model, dimension, retry attempts)
            embeddings: Pre-built LangChain embeddings (built from settings if None)
        """
        self._dimension = settings.embedding_dimension
        self._max_attempts = settings.max_attempts
        self._embeddings = embeddings or GoogleGenerativeAIEmbeddings(
            model=settings.embedding_model,
            google_api_key=settings.google_api_key or None,
        )
        logger.info(
            f"{__name__}:__init__ - Initialized with model={settings.embedding_model}, "
            f"output_dimensionality={self._dimension}"
        )

    @property
    def dimension(self) -> int:
        """Length of every vector this client returns."""
        return self._dimension

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single piece of text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Vector of exactly `dimension` floats

        Raises:
            EmbeddingError: Provider failed after retries or returned a
                vector of the wrong length
        """
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(Exception),
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:embed - Retry {retry_state.attempt_number}/"
                    f"{self._max_attempts} after provider error"
                ),
                reraise=True,
            ):
                with attempt:
                    vector = await self._embeddings.aembed_query(
                        text,
                        output_dimensionality=self._dimension,
                    )
        except Exception as e:
            raise EmbeddingError(
                f"Embedding request failed: {e}",
                {"error_type": type(e).__name__},
            ) from e

        if len(vector) != self._dimension:
            raise EmbeddingError(
                f"Embedding has {len(vector)} dimensions, expected {self._dimension}",
                {"received": len(vector), "expected": self._dimension},
            )
        return [float(value) for value in vector]
