"""
Logging setup for worker processes.

A single stdout handler on the root logger; module loggers created with
logging.getLogger(__name__) propagate to it.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(process)d] %(name)s: %(message)s"
ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "urllib3",
    "google_genai",
    "sqlalchemy.engine",
    "celery.utils.functional",
)


def configure_logging(level: str = "INFO") -> None:
    """
    Route all logging to stdout at the given level.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: Root level name (DEBUG, INFO, WARNING, ...)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=ISO_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
