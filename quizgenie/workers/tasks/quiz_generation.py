"""
Quiz generation Celery task.

Task: generate_quiz(quiz_id)
Flow: gather context -> generate -> validate -> persist -> update status

Dependencies: quizgenie.workers
System role: Async quiz generation task
"""

from quizgenie.core.exceptions import TaskError
from quizgenie.workers.celery_app import celery_app, celery_config
from quizgenie.workers.runner import TaskName, execute_task


@celery_app.task(
    bind=True,
    name=TaskName.GENERATE_QUIZ.value,
    max_retries=celery_config.task_max_retries,
    autoretry_for=(Exception,),
    dont_autoretry_for=(TaskError,),
    retry_backoff=celery_config.task_retry_backoff,
    retry_backoff_max=celery_config.task_retry_backoff_max,
)
def generate_quiz(self, quiz_id: int) -> dict:
    """
    Generate a quiz asynchronously.

    Args:
        quiz_id: Quiz ID

    Returns:
        dict: Serialized QuizGenerationResult
    """
    return execute_task(TaskName.GENERATE_QUIZ.value, {"quiz_id": quiz_id})
