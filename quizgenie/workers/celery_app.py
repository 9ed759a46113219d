"""
Celery application.

Workers run with a bounded pool (one task per slot, late acknowledgement) so
a crashed worker's task is redelivered rather than lost.

Dependencies: celery, python-dotenv, quizgenie.configs
System role: Background task queue configuration
"""

from celery import Celery
from celery.signals import worker_process_init
from dotenv import load_dotenv

from quizgenie.configs import get_settings
from quizgenie.observability.logger import configure_logging

load_dotenv()

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "quizgenie",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=[
        "quizgenie.workers.tasks.content_processing",
        "quizgenie.workers.tasks.quiz_generation",
    ],
)

celery_app.conf.update(
    task_serializer=celery_config.serializer,
    result_serializer=celery_config.serializer,
    accept_content=[celery_config.serializer],
    timezone=celery_config.timezone,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_concurrency=celery_config.worker_concurrency,
    worker_prefetch_multiplier=celery_config.worker_prefetch_multiplier,
)


@worker_process_init.connect
def init_worker_process(**kwargs) -> None:
    """Configure logging in each forked worker process."""
    configure_logging(settings.log_level)
