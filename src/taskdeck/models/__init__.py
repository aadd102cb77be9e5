"""Data models."""

from .document import DaySection, TaskDocument
from .task import Bucket, Target, Task, TaskCounts, TaskForm, Urgency
from .taskdeck_config import GrammarConfig, TaskDeckConfig

__all__ = [
    "Bucket",
    "DaySection",
    "GrammarConfig",
    "Target",
    "Task",
    "TaskCounts",
    "TaskDeckConfig",
    "TaskDocument",
    "TaskForm",
    "Urgency",
]
