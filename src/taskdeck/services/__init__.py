"""Service layer for business logic."""

from .config_service import ConfigService
from .task_service import DocumentSnapshot, TaskService, TaskSummary

__all__ = [
    "ConfigService",
    "DocumentSnapshot",
    "TaskService",
    "TaskSummary",
]
