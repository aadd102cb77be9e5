"""Exceptions raised by taskdeck."""

from pathlib import Path


class TaskDeckError(Exception):
    """Base class for taskdeck errors."""


class TargetNotFoundError(TaskDeckError):
    """A mutation's anchor (day or section) does not exist in the document."""


class TaskValidationError(TaskDeckError, ValueError):
    """Task form input was rejected before any line was touched."""


class StaleTaskError(TaskDeckError):
    """A task's source line no longer holds that task.

    Raised when a Task from an earlier parse is used against a document
    that has changed since.
    """


class DocumentNotFoundError(TaskDeckError):
    """The requested document does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Document not found: {path}")
        self.path = path


class DocumentIOError(TaskDeckError):
    """Reading or writing a document failed."""

    def __init__(self, operation: str, path: Path, cause: Exception | None = None) -> None:
        message = f"{operation} failed for {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.operation = operation
        self.path = path
        self.cause = cause
