"""Logging configuration and structured logging helpers."""

from quizgenie.observability.log_utils import log_exception_with_context, log_with_context
from quizgenie.observability.logger import configure_logging

__all__ = ["configure_logging", "log_with_context", "log_exception_with_context"]
