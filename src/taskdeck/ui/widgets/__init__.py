"""Widget components."""

from .task_form import TaskFormModal
from .task_row import TaskRow
from .task_section import EmptySectionMessage, TaskSection

__all__ = [
    "EmptySectionMessage",
    "TaskFormModal",
    "TaskRow",
    "TaskSection",
]
