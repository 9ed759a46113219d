"""
Generation client using Google Gemini chat models.

Generates structured multiple-choice quizzes and short bucket names.

Dependencies: langchain_google_genai, langchain_core, tenacity
System role: Text-generation capability for quiz and bucket naming
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from quizgenie.boundary.ai.quiz_prompts import NAME_PROMPT, QUIZ_PROMPT
from quizgenie.boundary.ai.quiz_schemas import GeneratedQuiz
from quizgenie.configs.ai import AISettings
from quizgenie.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


class GenerationClient:
    """
    Quiz and name generation backed by ChatGoogleGenerativeAI.

    Quiz generation uses structured output so the response is parsed into
    GeneratedQuiz before it reaches the caller.
    """

    def __init__(
        self,
        settings: AISettings,
        model: ChatGoogleGenerativeAI | None = None,
    ) -> None:
        """
        Initialize generation client.

        Args:
            settings: AI provider settings
            model: Pre-built chat model (built from settings if None)
        """
        self._max_attempts = settings.max_attempts
        self._model = model or ChatGoogleGenerativeAI(
            model=settings.chat_model,
            temperature=settings.temperature,
            google_api_key=settings.google_api_key or None,
        )
        self._quiz_chain = QUIZ_PROMPT | self._model.with_structured_output(GeneratedQuiz)
        self._name_chain = NAME_PROMPT | self._model.bind(
            max_output_tokens=settings.name_max_tokens,
        )
        logger.info(f"{__name__}:__init__ - Initialized with model={settings.chat_model}")

    def _retrying(self, operation: str) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception_type(Exception),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:{operation} - Retry {retry_state.attempt_number}/"
                f"{self._max_attempts} after provider error"
            ),
            reraise=True,
        )

    async def generate_quiz(
        self,
        context: str,
        question_count: int,
        choice_count: int,
        difficulty: str,
    ) -> GeneratedQuiz:
        """
        Generate a multiple-choice quiz from study material.

        Args:
            context: Study material text (may be empty)
            question_count: Number of questions requested
            choice_count: Number of choices per question
            difficulty: Difficulty label (easy, medium, hard)

        Returns:
            GeneratedQuiz: Parsed quiz, not yet validated

        Raises:
            GenerationError: Provider failure or unparseable response
        """
        try:
            async for attempt in self._retrying("generate_quiz"):
                with attempt:
                    result = await self._quiz_chain.ainvoke({
                        "context": context,
                        "question_count": question_count,
                        "choice_count": choice_count,
                        "difficulty": difficulty,
                    })
        except Exception as e:
            raise GenerationError(
                f"Quiz generation failed: {e}",
                {"error_type": type(e).__name__},
            ) from e

        if not isinstance(result, GeneratedQuiz):
            raise GenerationError(
                "Quiz generation returned an unparseable response",
                {"response_type": type(result).__name__},
            )
        return result

    async def generate_name(self, sample_text: str) -> str:
        """
        Generate a short display name for a bucket.

        Args:
            sample_text: Leading text of the bucket's first document

        Returns:
            str: Name with surrounding whitespace and quotes stripped

        Raises:
            GenerationError: Provider failure or empty response
        """
        try:
            async for attempt in self._retrying("generate_name"):
                with attempt:
                    message = await self._name_chain.ainvoke({"sample_text": sample_text})
        except Exception as e:
            raise GenerationError(
                f"Name generation failed: {e}",
                {"error_type": type(e).__name__},
            ) from e

        content = message.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        name = str(content).strip().strip("\"'").strip()
        if not name:
            raise GenerationError("Name generation returned an empty response")
        return name
