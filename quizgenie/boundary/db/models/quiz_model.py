"""
Quiz, Question and Answer ORM models.

A quiz is a generation job scoped to a bucket. Questions and answers are
written once, as a single transaction, by the quiz generation pipeline.

Dependencies: sqlalchemy, quizgenie.boundary.db.base
System role: Quiz persistence
"""

import enum

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizgenie.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class QuizStatus(str, enum.Enum):
    """
    Quiz generation lifecycle states.

    PENDING: Quiz requested, awaiting generation task
    GENERATING: Worker is building context and calling the generator
    READY: Questions persisted and authoritative
    FAILED: Generation or validation error; error_message contains details
    """

    PENDING = "pending"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """True for states no pipeline run moves out of."""
        return self in (QuizStatus.READY, QuizStatus.FAILED)

    def predecessors(self) -> tuple["QuizStatus", ...]:
        """States from which a transition into this state is allowed."""
        if self is QuizStatus.GENERATING or self.is_terminal:
            return (QuizStatus.PENDING, QuizStatus.GENERATING)
        return ()


class QuizModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Quiz ORM model.

    Attributes:
        id: Integer primary key
        bucket_id: Foreign key to BucketModel
        status: Generation state
        timed_mode: Quiz is taken against a clock
        practice_mode: Correct answers and explanations are revealed
        question_count: Requested number of questions
        choice_count: Requested choices per question
        difficulty: Requested difficulty label
        error_message: Error details if generation failed
    """

    __tablename__ = "quizzes"

    bucket_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("buckets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    status: Mapped[QuizStatus] = mapped_column(
        Enum(QuizStatus, native_enum=False),
        nullable=False,
        default=QuizStatus.PENDING,
    )

    timed_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    practice_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    question_count: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    choice_count: Mapped[int] = mapped_column(Integer, nullable=False, default=4)
    difficulty: Mapped[str] = mapped_column(String(32), nullable=False, default="medium")

    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    bucket = relationship("BucketModel", back_populates="quizzes")
    questions = relationship("QuestionModel", back_populates="quiz", order_by="QuestionModel.id")


class QuestionModel(Base, IntegerIDMixin, TimestampMixin):
    """Question belonging to exactly one quiz."""

    __tablename__ = "questions"

    quiz_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    text: Mapped[str] = mapped_column(Text, nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    quiz = relationship("QuizModel", back_populates="questions")
    answers = relationship("AnswerModel", back_populates="question", order_by="AnswerModel.id")


class AnswerModel(Base, IntegerIDMixin, TimestampMixin):
    """Answer choice belonging to exactly one question."""

    __tablename__ = "answers"

    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    text: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    question = relationship("QuestionModel", back_populates="answers")
