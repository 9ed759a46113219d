"""
Status writers for documents and quizzes.

Each write runs in its own short session and commits immediately so polling
clients see progress. A write that cannot be persisted is logged and reported
as False; callers count these instead of aborting the run.

Dependencies: sqlalchemy, quizgenie.boundary.db.CRUD
System role: Lifecycle status persistence for the pipelines
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quizgenie.boundary.db.CRUD import document_crud, quiz_crud

logger = logging.getLogger(__name__)


class StatusManager:
    """Persist Document and Quiz status transitions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize status manager.

        Args:
            session_factory: Factory for short-lived async sessions
        """
        self._session_factory = session_factory

    async def _write(self, entity: str, entity_id: int, status: str, write) -> bool:
        try:
            async with self._session_factory() as session:
                row = await write(session)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(
                f"{__name__}:_write - Failed to persist {entity} status",
                extra={
                    f"{entity}_id": entity_id,
                    "status": status,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            return False

        if row is None:
            logger.warning(
                f"{__name__}:_write - {entity} status transition not applied",
                extra={f"{entity}_id": entity_id, "status": status},
            )
            return False

        logger.info(
            f"{__name__}:_write - {entity} status updated",
            extra={f"{entity}_id": entity_id, "status": status},
        )
        return True

    async def document_processing(self, document_id: int) -> bool:
        """Mark a document as processing."""
        return await self._write(
            "document",
            document_id,
            "processing",
            lambda session: document_crud.mark_processing(session, document_id),
        )

    async def document_completed(
        self,
        document_id: int,
        chunk_count: int,
        embedded_chunk_count: int,
    ) -> bool:
        """
        Mark a document as completed with its chunk statistics.

        Args:
            document_id: Document ID
            chunk_count: Chunks stored
            embedded_chunk_count: Stored chunks with an embedding

        Returns:
            bool: True if the status was persisted
        """
        return await self._write(
            "document",
            document_id,
            "completed",
            lambda session: document_crud.mark_completed(
                session, document_id, chunk_count, embedded_chunk_count
            ),
        )

    async def document_failed(self, document_id: int, error_message: str) -> bool:
        """Mark a document as failed with an error message."""
        return await self._write(
            "document",
            document_id,
            "failed",
            lambda session: document_crud.mark_failed(session, document_id, error_message),
        )

    async def quiz_generating(self, quiz_id: int) -> bool:
        """Mark a quiz as generating."""
        return await self._write(
            "quiz",
            quiz_id,
            "generating",
            lambda session: quiz_crud.mark_generating(session, quiz_id),
        )

    async def quiz_ready(self, quiz_id: int) -> bool:
        """Mark a quiz as ready."""
        return await self._write(
            "quiz",
            quiz_id,
            "ready",
            lambda session: quiz_crud.mark_ready(session, quiz_id),
        )

    async def quiz_failed(self, quiz_id: int, error_message: str) -> bool:
        """Mark a quiz as failed with an error message."""
        return await self._write(
            "quiz",
            quiz_id,
            "failed",
            lambda session: quiz_crud.mark_failed(session, quiz_id, error_message),
        )
