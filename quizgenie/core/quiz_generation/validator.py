"""
Quiz content validator.

Checks generated quiz content before anything is persisted. Whitespace is
trimmed and surplus questions are dropped; structural violations reject the
whole quiz.

Dependencies: quizgenie.boundary.ai.quiz_schemas
System role: Validation stage between generation and persistence
"""

import logging

from quizgenie.boundary.ai.quiz_schemas import GeneratedChoice, GeneratedQuestion, GeneratedQuiz
from quizgenie.core.exceptions import QuizContentError

logger = logging.getLogger(__name__)

MIN_CHOICES = 2


class QuizContentValidator:
    """Validate and normalize generated quizzes."""

    def __init__(self, question_count: int, choice_count: int | None = None) -> None:
        """
        Initialize validator.

        Args:
            question_count: Number of questions requested for the quiz
            choice_count: Choices requested per question (None skips the check)
        """
        self._question_count = question_count
        self._choice_count = choice_count

    def validate(self, quiz: GeneratedQuiz) -> list[GeneratedQuestion]:
        """
        Validate a generated quiz.

        Args:
            quiz: Structured quiz returned by the generation client

        Returns:
            list[GeneratedQuestion]: Normalized questions, at most question_count

        Raises:
            QuizContentError: No questions, or a question breaks the
                one-correct-answer contract
        """
        questions = quiz.questions
        if len(questions) > self._question_count:
            logger.warning(
                f"{__name__}:validate - Dropping surplus questions",
                extra={"received": len(questions), "requested": self._question_count},
            )
            questions = questions[: self._question_count]

        if not questions:
            raise QuizContentError("Generated quiz contains no questions")

        return [self._validate_question(index, question) for index, question in enumerate(questions)]

    def _validate_question(self, index: int, question: GeneratedQuestion) -> GeneratedQuestion:
        text = question.text.strip()
        if not text:
            raise QuizContentError(f"Question {index + 1} has empty text", index)

        if len(question.choices) < MIN_CHOICES:
            raise QuizContentError(
                f"Question {index + 1} has {len(question.choices)} choices, "
                f"at least {MIN_CHOICES} required",
                index,
            )

        if self._choice_count is not None and len(question.choices) != self._choice_count:
            logger.warning(
                f"{__name__}:_validate_question - Choice count differs from request",
                extra={
                    "question_index": index,
                    "received": len(question.choices),
                    "requested": self._choice_count,
                },
            )

        choices = []
        for choice in question.choices:
            choice_text = choice.text.strip()
            if not choice_text:
                raise QuizContentError(f"Question {index + 1} has an empty choice", index)
            choices.append(
                GeneratedChoice(
                    text=choice_text,
                    is_correct=choice.is_correct,
                    explanation=choice.explanation.strip(),
                )
            )

        correct = sum(1 for choice in choices if choice.is_correct)
        if correct != 1:
            raise QuizContentError(
                f"Question {index + 1} has {correct} correct choices, expected exactly 1",
                index,
            )

        return GeneratedQuestion(
            text=text,
            explanation=question.explanation.strip(),
            choices=choices,
        )
