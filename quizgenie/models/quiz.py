"""
Quiz domain schemas.

Correctness flags and explanations on AnswerView and QuestionView are only
filled in for practice-mode quizzes.

Dependencies: pydantic
System role: Quiz and attempt read contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from quizgenie.boundary.db.models.quiz_model import QuizStatus


class QuizStatusResponse(BaseModel):
    """Generation status of one quiz."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    bucket_id: int
    status: QuizStatus
    timed_mode: bool
    practice_mode: bool
    question_count: int
    choice_count: int
    difficulty: str
    error_message: str | None = None
    created_at: datetime


class AnswerView(BaseModel):
    """Answer choice as shown to a quiz taker."""

    id: int
    text: str
    is_correct: bool | None = None
    explanation: str | None = None


class QuestionView(BaseModel):
    """Question with its answer choices."""

    id: int
    text: str
    explanation: str | None = None
    answers: list[AnswerView] = Field(default_factory=list)


class AttemptSummary(BaseModel):
    """One attempt in a user's history."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    quiz_id: int
    user_id: int
    score: float
    created_at: datetime


class AttemptAnswerDetail(BaseModel):
    """How one question of an attempt was answered."""

    question_id: int
    question_text: str
    selected_answer_id: int
    selected_answer_text: str
    is_correct: bool
    correct_answer_text: str | None = None
    explanation: str = ""


class AttemptDetailsResponse(BaseModel):
    """Attempt with per-question detail."""

    attempt_id: int
    quiz_id: int
    score: float
    answers: list[AttemptAnswerDetail] = Field(default_factory=list)
