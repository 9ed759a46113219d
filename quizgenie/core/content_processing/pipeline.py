"""
Content pipeline orchestrator.

Coordinates extraction, chunking, per-chunk persistence and embedding, bucket
auto-naming, and document status transitions.

Chunk failures are contained: a chunk that cannot be stored is skipped and a
chunk whose embedding fails is kept without one. Only extraction failures and
empty content end the run with a failed document.

Dependencies: All task modules, quizgenie.boundary, quizgenie.core.status_manager
System role: Content pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quizgenie.boundary.ai.embedding_client import EmbeddingClient
from quizgenie.boundary.ai.generation_client import GenerationClient
from quizgenie.boundary.db.CRUD import bucket_crud, chunk_crud, document_crud
from quizgenie.boundary.db.models.chunk_model import EMBEDDING_DIMENSION
from quizgenie.boundary.storage.local_storage import LocalFileStorage
from quizgenie.configs.pipeline import PipelineSettings
from quizgenie.core.content_processing.models import DocumentProcessingResult
from quizgenie.core.content_processing.tasks import ChunkingTask, ExtractionTask
from quizgenie.core.exceptions import (
    DocumentProcessingError,
    EmbeddingError,
    EmptyContentError,
    GenerationError,
)
from quizgenie.core.status_manager import StatusManager
from quizgenie.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

BUCKET_SAMPLE_SEPARATOR = "\n\n"


class ContentPipeline:
    """Orchestrate document processing: extract -> chunk -> store+embed -> name -> complete."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        embedder: EmbeddingClient,
        generator: GenerationClient,
        storage: LocalFileStorage,
        settings: PipelineSettings | None = None,
        embedding_dimension: int = EMBEDDING_DIMENSION,
    ) -> None:
        """
        Initialize pipeline with injected collaborators.

        Args:
            session_factory: Factory for short-lived async sessions
            embedder: Embedding capability
            generator: Generation capability (bucket naming)
            storage: Resolver for stored document files
            settings: Pipeline settings (uses defaults if None)
            embedding_dimension: Required embedding vector length
        """
        self._settings = settings or PipelineSettings()
        self._session_factory = session_factory
        self._embedder = embedder
        self._generator = generator
        self._storage = storage
        self._embedding_dimension = embedding_dimension

        self._extraction_task = ExtractionTask()
        self._chunking_task = ChunkingTask(chunk_size=self._settings.chunk_size)
        self._status = StatusManager(session_factory)

    async def process(self, document_id: int) -> DocumentProcessingResult:
        """
        Process a document through the full pipeline.

        Args:
            document_id: ID of a persisted document

        Returns:
            DocumentProcessingResult: Outcome and degradation details.
                Terminal failures are reported here, not raised.

        Raises:
            SQLAlchemyError: The document row could not be loaded
        """
        start_time = time.perf_counter()

        async with self._session_factory() as session:
            document = await document_crud.get_by_id(session, document_id)

        if document is None:
            logger.warning(
                f"{__name__}:process - Document not found",
                extra={"document_id": document_id},
            )
            return DocumentProcessingResult(
                document_id=document_id,
                outcome="not_found",
                processing_time_ms=self._elapsed_ms(start_time),
            )

        if document.status.is_terminal:
            logger.info(
                f"{__name__}:process - Document already terminal, skipping",
                extra={"document_id": document_id, "status": document.status.value},
            )
            return DocumentProcessingResult(
                document_id=document_id,
                outcome="skipped",
                chunk_count=document.chunk_count or 0,
                embedded_count=document.embedded_chunk_count or 0,
                processing_time_ms=self._elapsed_ms(start_time),
            )

        result = DocumentProcessingResult(document_id=document_id, outcome="completed")
        if not await self._status.document_processing(document_id):
            result.status_write_failures += 1

        try:
            file_path = self._storage.resolve(document.storage_path)
            text = await asyncio.to_thread(
                self._extraction_task.extract, file_path, document_id
            )
            chunks = self._chunking_task.chunk(text)
            if not chunks:
                raise EmptyContentError("no text chunks produced", document_id)
        except DocumentProcessingError as e:
            return await self._fail(result, e.message, start_time)

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:process - Text extracted and chunked",
            document_id=document_id,
            text_length=len(text),
            chunk_count=len(chunks),
        )

        embedded_count = await self._store_chunks(document_id, chunks, result)
        await self._delete_stale_chunks(document_id, len(chunks))

        result.chunk_count = len(chunks) - len(result.skipped_indices)
        result.embedded_count = await self._count_embedded(document_id, embedded_count)
        result.bucket_renamed = await self._rename_bucket(document_id, document.bucket_id)

        if not await self._status.document_completed(
            document_id, result.chunk_count, result.embedded_count
        ):
            result.status_write_failures += 1

        result.processing_time_ms = self._elapsed_ms(start_time)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:process - Document processing completed",
            document_id=document_id,
            chunk_count=result.chunk_count,
            embedded_count=result.embedded_count,
            skipped_indices=result.skipped_indices,
            failed_embedding_indices=result.failed_embedding_indices,
            degraded=result.degraded,
            processing_time_ms=result.processing_time_ms,
        )
        return result

    async def _store_chunks(
        self,
        document_id: int,
        chunks: list[str],
        result: DocumentProcessingResult,
    ) -> int:
        """
        Upsert and embed chunks strictly in sequence order.

        Args:
            document_id: Owning document ID
            chunks: Chunk texts in extraction order
            result: Result to record skipped and unembedded indices on

        Returns:
            int: Number of stored chunks carrying an embedding
        """
        embedded_count = 0
        for index, content in enumerate(chunks):
            try:
                async with self._session_factory() as session:
                    chunk = await chunk_crud.upsert(session, document_id, index, content)
                    await session.commit()
            except SQLAlchemyError as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:_store_chunks - Chunk insert failed, skipping",
                    e,
                    document_id=document_id,
                    sequence_index=index,
                )
                result.skipped_indices.append(index)
                continue

            if chunk.embedding is not None:
                embedded_count += 1
                continue

            if await self._embed_chunk(document_id, chunk.id, index, content):
                embedded_count += 1
            else:
                result.failed_embedding_indices.append(index)
        return embedded_count

    async def _embed_chunk(
        self,
        document_id: int,
        chunk_id: int,
        index: int,
        content: str,
    ) -> bool:
        try:
            vector = await self._embedder.embed(content)
            if len(vector) != self._embedding_dimension:
                raise EmbeddingError(
                    f"Embedding has {len(vector)} dimensions, "
                    f"expected {self._embedding_dimension}"
                )
            async with self._session_factory() as session:
                await chunk_crud.set_embedding(session, chunk_id, vector)
                await session.commit()
        except (EmbeddingError, SQLAlchemyError) as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_embed_chunk - Embedding not stored",
                e,
                document_id=document_id,
                sequence_index=index,
            )
            return False
        return True

    async def _delete_stale_chunks(self, document_id: int, chunk_count: int) -> None:
        """Drop rows left over from a previous, longer extraction."""
        try:
            async with self._session_factory() as session:
                deleted = await chunk_crud.delete_from_index(session, document_id, chunk_count)
                await session.commit()
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_delete_stale_chunks - Stale chunk cleanup failed",
                e,
                document_id=document_id,
            )
            return
        if deleted:
            logger.info(
                f"{__name__}:_delete_stale_chunks - Removed stale chunks",
                extra={"document_id": document_id, "deleted": deleted},
            )

    async def _count_embedded(self, document_id: int, fallback: int) -> int:
        """Count embedded rows as stored, falling back to the in-run tally."""
        try:
            async with self._session_factory() as session:
                return await chunk_crud.count_embedded(session, document_id)
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_count_embedded - Embedded chunk count read failed",
                e,
                document_id=document_id,
            )
            return fallback

    async def _rename_bucket(self, document_id: int, bucket_id: int) -> bool:
        """
        Name the bucket after the document's leading chunks.

        Args:
            document_id: Document whose chunks are sampled
            bucket_id: Bucket to rename

        Returns:
            bool: True if a generated name was saved
        """
        try:
            async with self._session_factory() as session:
                leading = await chunk_crud.get_by_document_id(
                    session,
                    document_id,
                    limit=self._settings.bucket_name_sample_chunks,
                )
            if not leading:
                return False

            sample_text = BUCKET_SAMPLE_SEPARATOR.join(chunk.content for chunk in leading)
            name = await self._generator.generate_name(sample_text)

            async with self._session_factory() as session:
                bucket = await bucket_crud.rename(session, bucket_id, name)
                await session.commit()
        except (GenerationError, SQLAlchemyError) as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_rename_bucket - Bucket auto-naming failed",
                e,
                document_id=document_id,
                bucket_id=bucket_id,
            )
            return False

        if bucket is None:
            logger.warning(
                f"{__name__}:_rename_bucket - Bucket not found",
                extra={"bucket_id": bucket_id},
            )
            return False

        logger.info(
            f"{__name__}:_rename_bucket - Bucket renamed",
            extra={"bucket_id": bucket_id, "bucket_name": bucket.name},
        )
        return True

    async def _fail(
        self,
        result: DocumentProcessingResult,
        error_message: str,
        start_time: float,
    ) -> DocumentProcessingResult:
        """Write the failed status and finish the result."""
        logger.error(
            f"{__name__}:_fail - Document processing failed",
            extra={"document_id": result.document_id, "error": error_message},
        )
        if not await self._status.document_failed(result.document_id, error_message):
            result.status_write_failures += 1
        result.outcome = "failed"
        result.error_message = error_message
        result.processing_time_ms = self._elapsed_ms(start_time)
        return result

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return (time.perf_counter() - start_time) * 1000
