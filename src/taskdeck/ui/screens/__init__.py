"""Screen components."""

from .help import HelpScreen
from .tasks import TasksScreen

__all__ = [
    "HelpScreen",
    "TasksScreen",
]
