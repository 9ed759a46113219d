"""
Document CRUD operations.

Status writes are conditional on the current status so a document never
moves backwards through its lifecycle.

Dependencies: sqlalchemy, quizgenie.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizgenie.boundary.db.models.document_model import DocumentModel, DocumentStatus
from quizgenie.boundary.db.CRUD.base_crud import BaseCRUD

MAX_ERROR_MESSAGE_LENGTH = 2000


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """Document reads by bucket and guarded status transitions."""

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def get_by_bucket_id(
        self,
        session: AsyncSession,
        bucket_id: int,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve all documents for a specific bucket.

        Args:
            session: Async database session
            bucket_id: Parent bucket ID
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of DocumentModels belonging to the bucket
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.bucket_id == bucket_id)
            .order_by(DocumentModel.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_status(
        self,
        session: AsyncSession,
        id: int,
        status: DocumentStatus,
        **fields,
    ) -> DocumentModel | None:
        """
        Move a document to a new processing status.

        The UPDATE only matches when the current status is an allowed
        predecessor of the new one.

        Args:
            session: Async database session
            id: Document ID
            status: New processing status
            **fields: Extra columns written with the status

        Returns:
            Updated DocumentModel, or None if the document is missing or the
            transition is not allowed
        """
        stmt = (
            update(DocumentModel)
            .where(DocumentModel.id == id)
            .where(DocumentModel.status.in_(status.predecessors()))
            .values(status=status, **fields)
            .returning(DocumentModel)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_processing(
        self,
        session: AsyncSession,
        id: int,
    ) -> DocumentModel | None:
        """Claim a pending document for a pipeline run."""
        return await self.update_status(session, id, DocumentStatus.PROCESSING)

    async def mark_completed(
        self,
        session: AsyncSession,
        id: int,
        chunk_count: int,
        embedded_chunk_count: int,
    ) -> DocumentModel | None:
        """
        Mark document as successfully processed.

        Args:
            session: Async database session
            id: Document ID
            chunk_count: Chunks stored for the document
            embedded_chunk_count: Stored chunks carrying an embedding

        Returns:
            Updated DocumentModel if the transition applied, None otherwise
        """
        return await self.update_status(
            session,
            id,
            DocumentStatus.COMPLETED,
            error_message=None,
            chunk_count=chunk_count,
            embedded_chunk_count=embedded_chunk_count,
        )

    async def mark_failed(
        self,
        session: AsyncSession,
        id: int,
        error_message: str,
    ) -> DocumentModel | None:
        """
        Mark document as failed with error details.

        Args:
            session: Async database session
            id: Document ID
            error_message: Human-readable error description

        Returns:
            Updated DocumentModel if the transition applied, None otherwise
        """
        return await self.update_status(
            session,
            id,
            DocumentStatus.FAILED,
            error_message=error_message[:MAX_ERROR_MESSAGE_LENGTH],
        )


document_crud = DocumentCRUD()
