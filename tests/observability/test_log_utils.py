"""
Test suite for structured logging helpers.

System role: Logging helper verification
"""

import logging

from quizgenie.boundary.db.models import DocumentStatus
from quizgenie.observability import configure_logging
from quizgenie.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_should_keep_scalars_and_short_index_lists(self) -> None:
        assert safe_log_value(12) == 12
        assert safe_log_value(None) is None
        assert safe_log_value([0, 3, 7]) == [0, 3, 7]

    def test_should_log_enum_value(self) -> None:
        assert safe_log_value(DocumentStatus.FAILED) == "failed"

    def test_should_summarize_embedding_sized_lists(self) -> None:
        assert safe_log_value([0.1] * 1536) == "<list of 1536>"

    def test_should_truncate_long_text(self) -> None:
        value = safe_log_value("x" * 1000, max_length=10)

        assert value == "xxxxxxxxxx...<1000 chars>"


class TestLogWithContext:
    """Test suite for the context logging helpers."""

    def test_should_attach_reduced_context(self, caplog) -> None:
        logger = logging.getLogger("quizgenie.test")

        with caplog.at_level(logging.INFO, logger="quizgenie.test"):
            log_with_context(logger, logging.INFO, "done", document_id=4, skipped=[1])

        record = caplog.records[-1]
        assert record.document_id == 4
        assert record.skipped == [1]

    def test_should_log_exception_type_at_warning(self, caplog) -> None:
        logger = logging.getLogger("quizgenie.test")

        with caplog.at_level(logging.WARNING, logger="quizgenie.test"):
            log_exception_with_context(logger, "chunk skipped", ValueError("bad row"), index=2)

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad row"


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_should_install_single_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")
            configure_logging("debug")

            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
