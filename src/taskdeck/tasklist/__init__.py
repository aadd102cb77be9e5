"""Markdown task list engine: parse, locate, mutate."""

from .grammar import TaskGrammar, TaskLine
from .locator import find_today, locate, resolve_day, target_for, today_section
from .mutations import TaskMutator, add_task, edit_task, toggle_completion
from .parser import TaskParser, parse, serialize, split_lines

__all__ = [
    "TaskGrammar",
    "TaskLine",
    "TaskMutator",
    "TaskParser",
    "add_task",
    "edit_task",
    "find_today",
    "locate",
    "parse",
    "resolve_day",
    "serialize",
    "split_lines",
    "target_for",
    "today_section",
    "toggle_completion",
]
