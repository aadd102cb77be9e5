"""Task section widget."""

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from .task_row import TaskRow


class EmptySectionMessage(Static):
    """Displayed when a section has no tasks."""

    pass


class TaskSection(Widget):
    """A titled group of task rows (one urgency tier, backlog or completed)."""

    DEFAULT_CSS = """
    TaskSection {
        height: auto;
        margin-bottom: 1;
    }

    TaskSection .section-header {
        text-style: bold;
        color: $primary;
    }

    TaskSection .section-content {
        height: auto;
    }

    TaskSection EmptySectionMessage {
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, title: str, key: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self.key = key
        self._tasks: list[Task] = []

    def compose(self) -> ComposeResult:
        yield Static(self._header_text, classes="section-header", id=f"header-{self.key}")
        yield Widget(classes="section-content", id=f"content-{self.key}")

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{self.title} [dim]({len(self._tasks)})[/]"

    def set_tasks(self, tasks: list[Task], title: str | None = None) -> None:
        """Set the tasks for this section."""
        self._tasks = tasks
        if title is not None:
            self.title = title
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_tasks)

    async def _refresh_tasks(self) -> None:
        """Rebuild the task rows."""
        try:
            content = self.query_one(f"#content-{self.key}", Widget)
        except Exception as e:
            self.log.error(f"Cannot find content for section {self.key}: {e}")
            return

        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptySectionMessage("No tasks"))
        else:
            await content.mount_all(TaskRow(task, id=f"task-{task.id}") for task in self._tasks)

        try:
            header = self.query_one(f"#header-{self.key}", Static)
            header.update(self._header_text)
        except Exception:
            pass

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    def focus_task(self, task: Task) -> bool:
        """Focus the row for ``task``; False if it is not displayed yet."""
        try:
            row = self.query_one(f"#task-{task.id}", TaskRow)
        except Exception:
            return False
        row.focus()
        row.scroll_visible()
        return True
