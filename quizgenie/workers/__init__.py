"""
Celery workers module.

Async task processing for content processing and quiz generation.

Dependencies: celery, quizgenie.configs
System role: Background task processing
"""

from quizgenie.workers.celery_app import celery_app

__all__ = ["celery_app"]
