"""
Bucket ORM model.

A user-owned collection of documents and the quizzes derived from them.
Created outside the processing core; the core only renames it.

Dependencies: sqlalchemy, quizgenie.boundary.db.base
System role: Grouping entity for documents and quizzes
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizgenie.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class BucketModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Bucket ORM model.

    Attributes:
        id: Integer primary key
        user_id: Owning user (managed by the auth collaborator)
        name: Display name, replaced by auto-naming after the first document is processed
    """

    __tablename__ = "buckets"

    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    documents = relationship("DocumentModel", back_populates="bucket")
    quizzes = relationship("QuizModel", back_populates="bucket")
