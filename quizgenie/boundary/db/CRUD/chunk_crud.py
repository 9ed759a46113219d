"""
Chunk CRUD operations.

Chunks are addressed by (document_id, sequence_index). Upserting on that key
makes re-processing a document reuse its rows instead of duplicating them.

Dependencies: sqlalchemy, quizgenie.boundary.db.models
System role: Chunk and embedding persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quizgenie.boundary.db.models.chunk_model import ChunkModel
from quizgenie.boundary.db.models.document_model import DocumentModel, DocumentStatus
from quizgenie.boundary.db.CRUD.base_crud import BaseCRUD


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel."""

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def get_by_position(
        self,
        session: AsyncSession,
        document_id: int,
        sequence_index: int,
    ) -> ChunkModel | None:
        """
        Retrieve the chunk at a given position of a document.

        Args:
            session: Async database session
            document_id: Owning document ID
            sequence_index: Zero-based chunk position

        Returns:
            ChunkModel if found, None otherwise
        """
        stmt = select(ChunkModel).where(
            ChunkModel.document_id == document_id,
            ChunkModel.sequence_index == sequence_index,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        session: AsyncSession,
        document_id: int,
        sequence_index: int,
        content: str,
    ) -> ChunkModel:
        """
        Insert a chunk, or reuse the existing row at the same position.

        An existing row with different content is rewritten and its
        embedding cleared, since the old vector no longer describes it.

        Args:
            session: Async database session
            document_id: Owning document ID
            sequence_index: Zero-based chunk position
            content: Chunk text

        Returns:
            The inserted or reused ChunkModel
        """
        existing = await self.get_by_position(session, document_id, sequence_index)
        if existing is None:
            return await self.create(
                session,
                document_id=document_id,
                sequence_index=sequence_index,
                content=content,
                embedding=None,
            )

        if existing.content != content:
            existing.content = content
            existing.embedding = None
            await session.flush()
        return existing

    async def set_embedding(
        self,
        session: AsyncSession,
        id: int,
        embedding: list[float],
    ) -> ChunkModel | None:
        """
        Attach an embedding vector to a chunk.

        Args:
            session: Async database session
            id: Chunk ID
            embedding: Complete embedding vector

        Returns:
            Updated ChunkModel if found, None otherwise
        """
        return await self.update_by_id(session, id, embedding=embedding)

    async def get_by_document_id(
        self,
        session: AsyncSession,
        document_id: int,
        limit: int | None = None,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve a document's chunks in sequence order.

        Args:
            session: Async database session
            document_id: Owning document ID
            limit: Maximum number of leading chunks to return

        Returns:
            Sequence of ChunkModels ordered by sequence_index ascending
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.document_id == document_id)
            .order_by(ChunkModel.sequence_index.asc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_bucket_id(
        self,
        session: AsyncSession,
        bucket_id: int,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve the chunks of a bucket's completed documents.

        Args:
            session: Async database session
            bucket_id: Bucket ID

        Returns:
            Sequence of ChunkModels ordered by document, then sequence index
        """
        stmt = (
            select(ChunkModel)
            .join(DocumentModel, DocumentModel.id == ChunkModel.document_id)
            .where(
                DocumentModel.bucket_id == bucket_id,
                DocumentModel.status == DocumentStatus.COMPLETED,
            )
            .order_by(ChunkModel.document_id.asc(), ChunkModel.sequence_index.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_embedded(self, session: AsyncSession, document_id: int) -> int:
        """
        Count a document's chunks that carry an embedding.

        Args:
            session: Async database session
            document_id: Owning document ID

        Returns:
            int: Number of chunks with a non-null embedding
        """
        stmt = select(func.count(ChunkModel.id)).where(
            ChunkModel.document_id == document_id,
            ChunkModel.embedding.is_not(None),
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def delete_from_index(
        self,
        session: AsyncSession,
        document_id: int,
        first_stale_index: int,
    ) -> int:
        """
        Delete chunks at or beyond a sequence index.

        Used when a re-run produces fewer chunks than a previous run.

        Args:
            session: Async database session
            document_id: Owning document ID
            first_stale_index: Smallest sequence index to delete

        Returns:
            int: Number of rows deleted
        """
        stmt = delete(ChunkModel).where(
            ChunkModel.document_id == document_id,
            ChunkModel.sequence_index >= first_stale_index,
        )
        result = await session.execute(stmt)
        return result.rowcount


chunk_crud = ChunkCRUD()
