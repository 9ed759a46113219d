"""
Structured output schemas for quiz generation.

Dependencies: pydantic
System role: Generation client response schema definitions
"""

from pydantic import BaseModel, Field


class GeneratedChoice(BaseModel):
    """One answer choice proposed by the model."""

    text: str = Field(description="Answer choice text")
    is_correct: bool = Field(description="True for the single correct choice")
    explanation: str = Field(
        default="",
        description="Why this choice is right or wrong",
    )


class GeneratedQuestion(BaseModel):
    """One multiple-choice question proposed by the model."""

    text: str = Field(description="Question text")
    explanation: str = Field(default="", description="Explanation of the correct answer")
    choices: list[GeneratedChoice] = Field(
        default_factory=list,
        description="Answer choices, exactly one of them correct",
    )


class GeneratedQuiz(BaseModel):
    """Structured quiz returned by the generation client."""

    questions: list[GeneratedQuestion] = Field(
        default_factory=list,
        description="Generated questions in presentation order",
    )
