"""
Test suite for the embedding and generation clients.

The LangChain provider classes are replaced with mocks and fake chat models;
no network calls are made.

System role: Verification of the AI provider boundary
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from quizgenie.boundary.ai import EmbeddingClient, GenerationClient, GeneratedQuiz
from quizgenie.configs.ai import AISettings
from quizgenie.core.exceptions import EmbeddingError, GenerationError, TransientIOError

from factories import make_generated_quiz


@pytest.fixture
def ai_settings() -> AISettings:
    return AISettings(embedding_dimension=4, max_attempts=1, google_api_key="test-key")


def make_chat_model(responses: list[str] | None = None, structured=None, error: Exception | None = None):
    """Build a fake chat model whose structured output returns a fixed value."""

    class FakeQuizModel(FakeListChatModel):
        def with_structured_output(self, schema, **kwargs):
            def respond(_):
                if error is not None:
                    raise error
                return structured

            return RunnableLambda(respond)

    return FakeQuizModel(responses=responses or ["unused"])


class TestEmbeddingClient:
    """Test suite for EmbeddingClient.embed()."""

    async def test_should_request_configured_dimension(self, ai_settings) -> None:
        # Arrange
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(return_value=[1, 2, 3, 4])
        client = EmbeddingClient(ai_settings, embeddings=embeddings)

        # Act
        vector = await client.embed("cell membrane")

        # Assert
        assert vector == [1.0, 2.0, 3.0, 4.0]
        embeddings.aembed_query.assert_awaited_once_with("cell membrane", output_dimensionality=4)

    async def test_should_reject_wrong_dimension(self, ai_settings) -> None:
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(return_value=[0.1, 0.2])
        client = EmbeddingClient(ai_settings, embeddings=embeddings)

        with pytest.raises(EmbeddingError) as exc_info:
            await client.embed("text")

        assert exc_info.value.details == {"received": 2, "expected": 4}

    async def test_should_wrap_provider_error_as_transient(self, ai_settings) -> None:
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(side_effect=RuntimeError("429 Resource exhausted"))
        client = EmbeddingClient(ai_settings, embeddings=embeddings)

        with pytest.raises(TransientIOError, match="429"):
            await client.embed("text")

    async def test_should_retry_before_giving_up(self) -> None:
        # Arrange
        settings = AISettings(embedding_dimension=2, max_attempts=2, google_api_key="test-key")
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(side_effect=[RuntimeError("timeout"), [0.5, 0.5]])
        client = EmbeddingClient(settings, embeddings=embeddings)

        # Act
        vector = await client.embed("text")

        # Assert
        assert vector == [0.5, 0.5]
        assert embeddings.aembed_query.await_count == 2


class TestGenerationClientQuiz:
    """Test suite for GenerationClient.generate_quiz()."""

    async def test_should_return_structured_quiz(self, ai_settings) -> None:
        # Arrange
        quiz = make_generated_quiz(2)
        client = GenerationClient(ai_settings, model=make_chat_model(structured=quiz))

        # Act
        result = await client.generate_quiz("Cells divide by mitosis.", 2, 4, "easy")

        # Assert
        assert isinstance(result, GeneratedQuiz)
        assert len(result.questions) == 2

    async def test_should_wrap_provider_error(self, ai_settings) -> None:
        client = GenerationClient(
            ai_settings, model=make_chat_model(error=RuntimeError("500 internal"))
        )

        with pytest.raises(GenerationError, match="500 internal"):
            await client.generate_quiz("", 10, 4, "medium")

    async def test_should_reject_unparsed_response(self, ai_settings) -> None:
        client = GenerationClient(ai_settings, model=make_chat_model(structured=None))

        with pytest.raises(GenerationError, match="unparseable"):
            await client.generate_quiz("text", 1, 4, "medium")


class TestGenerationClientName:
    """Test suite for GenerationClient.generate_name()."""

    async def test_should_strip_quotes_and_whitespace(self, ai_settings) -> None:
        client = GenerationClient(ai_settings, model=make_chat_model(responses=['  "Cell Biology"\n']))

        assert await client.generate_name("Cells are the unit of life.") == "Cell Biology"

    async def test_should_reject_empty_name(self, ai_settings) -> None:
        client = GenerationClient(ai_settings, model=make_chat_model(responses=["   "]))

        with pytest.raises(GenerationError, match="empty"):
            await client.generate_name("text")
