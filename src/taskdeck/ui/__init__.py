"""UI components."""

from .screens.tasks import TasksScreen
from .widgets.task_row import TaskRow
from .widgets.task_section import TaskSection

__all__ = [
    "TaskRow",
    "TaskSection",
    "TasksScreen",
]
