"""
Document service orchestrator.

Registers uploaded documents for background processing and reports their
processing status.

Dependencies: quizgenie.boundary.db, quizgenie.workers
System role: Document intake and status orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from quizgenie.boundary.db.CRUD import bucket_crud, document_crud
from quizgenie.boundary.db.models.document_model import DocumentModel, DocumentStatus
from quizgenie.core.exceptions import DocumentNotFoundError, NotFoundError
from quizgenie.models.document import DocumentStatusResponse
from quizgenie.workers.dispatcher import TaskDispatcher
from quizgenie.workers.runner import TaskName

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Document service orchestrator.

    Handles document lifecycle from the intake side: registration,
    enqueueing, and status polling. Processing itself runs in workers.
    """

    def __init__(
        self,
        db: AsyncSession,
        dispatcher: TaskDispatcher | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document metadata
            dispatcher: Optional task dispatcher (created if None)
        """
        self.db = db
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> TaskDispatcher:
        """Lazy-load dispatcher."""
        if self._dispatcher is None:
            self._dispatcher = TaskDispatcher()
        return self._dispatcher

    async def register_upload(
        self,
        bucket_id: int,
        name: str,
        storage_path: str,
    ) -> DocumentModel:
        """
        Register a stored upload and enqueue its processing.

        The document row is committed before the task is enqueued so the
        worker can load it. An enqueue failure leaves the document pending
        and does not fail the call.

        Args:
            bucket_id: Owning bucket ID
            name: Original filename
            storage_path: Location of the stored file

        Returns:
            DocumentModel: Created document with PENDING status

        Raises:
            NotFoundError: Bucket does not exist
        """
        bucket = await bucket_crud.get_by_id(self.db, bucket_id)
        if bucket is None:
            raise NotFoundError("bucket", bucket_id)

        document = await document_crud.create(
            self.db,
            bucket_id=bucket_id,
            name=name,
            storage_path=storage_path,
            status=DocumentStatus.PENDING,
        )
        await self.db.commit()

        task_id = self.dispatcher.enqueue(
            TaskName.PROCESS_DOCUMENT.value,
            {"document_id": document.id},
        )
        if task_id is None:
            logger.warning(
                f"{__name__}:register_upload - Document registered but not enqueued",
                extra={"document_id": document.id},
            )
        return document

    async def get_document_status(self, document_id: int) -> DocumentStatusResponse:
        """
        Get a document's processing status.

        Args:
            document_id: Document ID

        Returns:
            DocumentStatusResponse: Current status and chunk statistics

        Raises:
            DocumentNotFoundError: Document does not exist
        """
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return DocumentStatusResponse.model_validate(document)

    async def list_bucket_documents(self, bucket_id: int) -> list[DocumentStatusResponse]:
        """List a bucket's documents, oldest first."""
        documents = await document_crud.get_by_bucket_id(self.db, bucket_id)
        return [DocumentStatusResponse.model_validate(doc) for doc in documents]
