"""
Attempt and AttemptAnswer ORM models.

An attempt is one user's submission against a ready quiz; its attempt
answers are the immutable per-question audit trail behind the score.

Dependencies: sqlalchemy, quizgenie.boundary.db.base
System role: Scoring persistence
"""

from sqlalchemy import Boolean, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizgenie.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class AttemptModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Attempt ORM model.

    Attributes:
        id: Integer primary key
        quiz_id: Foreign key to QuizModel
        user_id: Submitting user
        score: Percentage score rounded to two decimals
    """

    __tablename__ = "attempts"

    quiz_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    # Relationships
    attempt_answers = relationship(
        "AttemptAnswerModel",
        back_populates="attempt",
        order_by="AttemptAnswerModel.id",
    )


class AttemptAnswerModel(Base, IntegerIDMixin, TimestampMixin):
    """Selected answer for one question of an attempt."""

    __tablename__ = "attempt_answers"

    attempt_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("attempts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    )

    answer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=False,
    )

    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)

    # Relationships
    attempt = relationship("AttemptModel", back_populates="attempt_answers")
