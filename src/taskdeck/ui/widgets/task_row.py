"""Task row widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task


class TaskRow(Widget, can_focus=True):
    """A single task line in a section."""

    DEFAULT_CSS = """
    TaskRow {
        height: 1;
        padding: 0 1;
    }

    TaskRow:focus {
        background: $primary 30%;
    }

    TaskRow .task-check {
        width: 4;
    }

    TaskRow .task-category {
        width: auto;
        padding-right: 1;
        color: $text-muted;
    }

    TaskRow .task-text {
        width: 1fr;
    }

    TaskRow.-completed .task-text {
        text-style: strike;
        color: $text-muted;
    }
    """

    def __init__(self, task_data: Task, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        if task_data.completed:
            self.add_class("-completed")

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this row."""
        return self._task_data

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static(self._format_check(), classes="task-check")
            yield Static(f"[{self._task_data.category}]", classes="task-category", markup=False)
            yield Static(self._format_text(), classes="task-text", markup=False)

    def _format_check(self) -> str:
        return "[green]☑[/]" if self._task_data.completed else "☐"

    def _format_text(self) -> str:
        text = self._truncate(self._task_data.text, 80)
        if self._task_data.completed_on:
            return f"{text} ({self._task_data.completed_on})"
        return text

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
