"""
Content processing Celery task.

Task: process_document(document_id)
Flow: extract -> chunk -> store + embed -> name bucket -> update status

Dependencies: quizgenie.workers
System role: Async document processing task
"""

from quizgenie.core.exceptions import TaskError
from quizgenie.workers.celery_app import celery_app, celery_config
from quizgenie.workers.runner import TaskName, execute_task


@celery_app.task(
    bind=True,
    name=TaskName.PROCESS_DOCUMENT.value,
    max_retries=celery_config.task_max_retries,
    autoretry_for=(Exception,),
    dont_autoretry_for=(TaskError,),
    retry_backoff=celery_config.task_retry_backoff,
    retry_backoff_max=celery_config.task_retry_backoff_max,
)
def process_document(self, document_id: int) -> dict:
    """
    Process an uploaded document asynchronously.

    Args:
        document_id: Document ID

    Returns:
        dict: Serialized DocumentProcessingResult
    """
    return execute_task(TaskName.PROCESS_DOCUMENT.value, {"document_id": document_id})
