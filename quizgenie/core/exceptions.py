"""
Exception hierarchy for the QuizGenie processing core.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class QuizGenieException(Exception):
    """Base exception for all QuizGenie application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message; details stay available on the instance."""
        return self.message


class NotFoundError(QuizGenieException):
    """Raised when an entity id does not resolve to a row."""

    def __init__(
        self,
        entity: str,
        entity_id: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not-found error.

        Args:
            entity: Entity kind (document, quiz, attempt)
            entity_id: ID that was looked up
            details: Additional context
        """
        details = details or {}
        details[f"{entity}_id"] = entity_id
        super().__init__(f"{entity.capitalize()} not found: {entity_id}", details)


class DocumentNotFoundError(NotFoundError):
    """Raised when a document cannot be found."""

    def __init__(self, document_id: int) -> None:
        super().__init__("document", document_id)


class QuizNotFoundError(NotFoundError):
    """Raised when a quiz cannot be found."""

    def __init__(self, quiz_id: int) -> None:
        super().__init__("quiz", quiz_id)


class AttemptNotFoundError(NotFoundError):
    """Raised when an attempt cannot be found."""

    def __init__(self, attempt_id: int) -> None:
        super().__init__("attempt", attempt_id)


class DocumentProcessingError(QuizGenieException):
    """Base exception for terminal document processing errors."""

    def __init__(
        self,
        message: str,
        document_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id is not None:
            details["document_id"] = document_id
        super().__init__(message, details)


class ExtractionError(DocumentProcessingError):
    """Raised when a stored document cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        document_id: int | None = None,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Error message
            document_id: ID of the document
            file_path: Path of the file that failed extraction
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, document_id, details)


class EmptyContentError(DocumentProcessingError):
    """Raised when extraction produced no chunkable text."""

    pass


class TransientIOError(QuizGenieException):
    """Raised when an AI provider or network call fails."""

    pass


class EmbeddingError(TransientIOError):
    """Raised when embedding generation fails or returns a malformed vector."""

    pass


class GenerationError(TransientIOError):
    """Raised when quiz or bucket name generation fails."""

    pass


class QuizContentError(QuizGenieException):
    """Raised when generated quiz content violates the structural contract."""

    def __init__(
        self,
        message: str,
        question_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize quiz content error.

        Args:
            message: Error message
            question_index: Zero-based index of the offending question
            details: Additional context
        """
        details = details or {}
        if question_index is not None:
            details["question_index"] = question_index
        super().__init__(message, details)


class QuizNotReadyError(QuizGenieException):
    """Raised when a submission or read targets a quiz that is not ready."""

    def __init__(self, quiz_id: int, status: str) -> None:
        super().__init__(
            f"Quiz {quiz_id} is not ready (status={status})",
            {"quiz_id": quiz_id, "status": status},
        )


class AttemptAccessError(QuizGenieException):
    """Raised when a user reads an attempt that belongs to someone else."""

    pass


class TaskError(QuizGenieException):
    """Base exception for task dispatch and execution errors."""

    pass


class UnknownTaskError(TaskError):
    """Raised when no handler is registered for a task name."""

    def __init__(self, task_name: str) -> None:
        super().__init__(f"No handler registered for task: {task_name}", {"task_name": task_name})


class TaskPayloadError(TaskError):
    """Raised when a task payload fails validation."""

    pass
