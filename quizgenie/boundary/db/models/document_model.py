"""
Document ORM model.

Represents uploaded documents with processing status and metadata.
Tracks document ingestion lifecycle from upload to chunk embedding.

Dependencies: sqlalchemy, quizgenie.boundary.db.base
System role: Document persistence for ingestion tracking
"""

import enum

from sqlalchemy import Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizgenie.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class DocumentStatus(str, enum.Enum):
    """
    Document processing lifecycle states.

    PENDING: Document uploaded, awaiting ingestion task
    PROCESSING: Worker is extracting, chunking, and embedding
    COMPLETED: Chunks stored; embeddings attached where the provider succeeded
    FAILED: Processing error; error_message field contains details
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """True for states no pipeline run moves out of."""
        return self in (DocumentStatus.COMPLETED, DocumentStatus.FAILED)

    def predecessors(self) -> tuple["DocumentStatus", ...]:
        """
        States from which a transition into this state is allowed.

        Status only moves forward: pending -> processing -> completed | failed.
        A completion may also follow pending directly when the processing
        write was lost.
        """
        if self is DocumentStatus.PROCESSING:
            return (DocumentStatus.PENDING, DocumentStatus.PROCESSING)
        if self.is_terminal:
            return (DocumentStatus.PENDING, DocumentStatus.PROCESSING)
        return ()


class DocumentModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Document ORM model tracking ingestion pipeline state.

    Lifecycle: Upload (PENDING) → worker processing (PROCESSING) → chunks
    stored (COMPLETED) or failure (FAILED). Only the content pipeline
    mutates status after creation.

    Attributes:
        id: Integer primary key
        bucket_id: Foreign key to BucketModel
        name: Original filename (255 char limit)
        storage_path: File path of the raw document (1024 char limit)
        status: Current processing state
        error_message: Null if success; human-readable error if FAILED
        chunk_count: Chunks stored by the last completed run
        embedded_chunk_count: Stored chunks that carry an embedding
    """

    __tablename__ = "documents"

    bucket_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("buckets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original filename",
    )

    storage_path: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Storage locator for the raw document",
    )

    status: Mapped[DocumentStatus] = mapped_column(
        Enum(DocumentStatus, native_enum=False),
        nullable=False,
        default=DocumentStatus.PENDING,
    )

    error_message: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Error details if processing failed",
    )

    chunk_count: Mapped[int | None] = mapped_column(Integer, nullable=True)

    embedded_chunk_count: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    bucket = relationship("BucketModel", back_populates="documents")
    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        order_by="ChunkModel.sequence_index",
    )
