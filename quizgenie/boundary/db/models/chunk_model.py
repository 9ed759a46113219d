"""
Chunk ORM model.

A bounded segment of a document's extracted text plus its embedding vector.
PostgreSQL stores the embedding in a pgvector column; other dialects
(SQLite in tests) fall back to JSON.

Dependencies: sqlalchemy, pgvector, quizgenie.boundary.db.base
System role: Chunk and embedding persistence
"""

from pgvector.sqlalchemy import Vector
from sqlalchemy import JSON, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizgenie.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from quizgenie.configs import get_settings

EMBEDDING_DIMENSION = get_settings().ai.embedding_dimension


class ChunkModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Chunk ORM model.

    Sequence indices of one document are contiguous from 0 in extraction
    order; (document_id, sequence_index) is unique so a re-run upserts
    instead of duplicating rows. The embedding is either NULL or a complete
    EMBEDDING_DIMENSION-length vector.

    Attributes:
        id: Integer primary key
        document_id: Foreign key to DocumentModel
        sequence_index: Zero-based position within the document
        content: Chunk text
        embedding: Embedding vector, NULL until computed
    """

    __tablename__ = "chunks"
    __table_args__ = (
        UniqueConstraint("document_id", "sequence_index"),
    )

    document_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    sequence_index: Mapped[int] = mapped_column(Integer, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    embedding: Mapped[list[float] | None] = mapped_column(
        Vector(EMBEDDING_DIMENSION).with_variant(JSON(none_as_null=True), "sqlite"),
        nullable=True,
    )

    # Relationships
    document = relationship("DocumentModel", back_populates="chunks")
