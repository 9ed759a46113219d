"""
Structured logging helpers.

Context passed through `extra` must be cheap to format and must not carry
whole chunk texts or embedding vectors into log records.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import enum
import logging
from typing import Any

MAX_VALUE_LENGTH = 300
MAX_LISTED_ITEMS = 20


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> Any:
    """
    Reduce a value to something small and log-safe.

    Numbers, bools and None pass through. Enums log their value. Short
    lists of scalars (e.g. skipped chunk indices) are kept; longer or nested
    collections are summarized by size.

    Args:
        value: Value to reduce
        max_length: Longest string kept before truncation

    Returns:
        Any: Log-safe value
    """
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, tuple, set)):
        items = list(value)
        if len(items) <= MAX_LISTED_ITEMS and all(
            isinstance(item, (bool, int, float, str)) for item in items
        ):
            return [safe_log_value(item, max_length) for item in items]
        return f"<{type(value).__name__} of {len(items)}>"
    if isinstance(value, dict):
        return f"<dict of {len(value)}>"

    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}...<{len(text)} chars>"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with reduced context values attached as `extra`.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context key-value pairs
    """
    logger.log(level, message, extra={k: safe_log_value(v) for k, v in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log a contained failure at WARNING with its traceback.

    For failures the pipeline absorbs (skipped chunk, missing embedding,
    failed bucket rename) rather than propagates.

    Args:
        logger: Logger instance
        message: Log message
        exc: Handled exception
        **context: Context key-value pairs
    """
    extra = {k: safe_log_value(v) for k, v in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.warning(message, extra=extra, exc_info=exc)
