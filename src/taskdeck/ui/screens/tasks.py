"""Main task list screen."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.events import DescendantFocus
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...errors import TaskDeckError, TargetNotFoundError
from ...models import DaySection, Target, Task, Urgency
from ...services import DocumentSnapshot
from ...tasklist import find_today, resolve_day
from ..widgets.task_row import TaskRow
from ..widgets.task_section import TaskSection

URGENCY_TITLES = {
    Urgency.MUST: "Must Do Today",
    Urgency.SHOULD: "Should Do Today",
    Urgency.NORMAL: "Other Tasks",
}


class TasksScreen(Screen):
    """Selected day's tasks by urgency, plus backlog and completed log."""

    DEFAULT_CSS = """
    TasksScreen #summary {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    TasksScreen #day-title {
        height: 1;
        padding: 0 1;
        text-style: bold;
    }

    TasksScreen #sections {
        padding: 1 1 0 1;
    }

    TasksScreen #load-error {
        color: $error;
        padding: 1 2;
        display: none;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._snapshot: DocumentSnapshot | None = None
        self._day_offset = 0
        self._visible_tasks: list[Task] = []
        self._current = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="summary")
        yield Static("", id="day-title", markup=False)
        yield Static("", id="load-error", markup=False)
        with VerticalScroll(id="sections"):
            for urgency in Urgency:
                yield TaskSection(URGENCY_TITLES[urgency], urgency.value, id=f"section-{urgency.value}")
            yield TaskSection("Backlog", "backlog", id="section-backlog")
            yield TaskSection("Completed", "completed", id="section-completed")
        yield Footer()

    def on_mount(self) -> None:
        self.reload()

    # --- Data ---

    @property
    def snapshot(self) -> DocumentSnapshot | None:
        return self._snapshot

    @property
    def day_offset(self) -> int:
        return self._day_offset

    def reload(self) -> None:
        """Re-read the task file and redraw."""
        try:
            snapshot = self.app.task_service.load()  # pyrefly: ignore[missing-attribute]
        except TaskDeckError as e:
            self.show_error(str(e))
            return
        self.app.watcher.mark_seen(snapshot.file.modified)  # pyrefly: ignore[missing-attribute]
        self.show_snapshot(snapshot)

    def show_error(self, message: str) -> None:
        error = self.query_one("#load-error", Static)
        error.update(f"{message}\nPress r to retry.")
        error.display = True

    def selected_day(self) -> DaySection | None:
        if self._snapshot is None or not self._snapshot.document.days:
            return None
        document = self._snapshot.document
        today = self.app.task_service.today()  # pyrefly: ignore[missing-attribute]
        try:
            index = resolve_day(document, self._day_offset, today)
        except TargetNotFoundError:
            self._day_offset = 0
            index = find_today(document, today)
        return document.days[index]

    def show_snapshot(self, snapshot: DocumentSnapshot) -> None:
        """Display a freshly parsed document, keeping the cursor position."""
        self._snapshot = snapshot
        self.query_one("#load-error", Static).display = False

        summary = self.app.task_service.summary(snapshot)  # pyrefly: ignore[missing-attribute]
        self.query_one("#summary", Static).update(
            f"{summary.counts.pending} pending · {summary.counts.completed} completed"
        )

        day = self.selected_day()
        title = day.title if day else "No day sections"
        if day and self._day_offset == 0:
            title = f"{title} (today)"
        self.query_one("#day-title", Static).update(title)

        groups: list[tuple[str, list[Task]]] = [
            (Urgency.MUST.value, list(day.must_do) if day else []),
            (Urgency.SHOULD.value, list(day.should_do) if day else []),
            (Urgency.NORMAL.value, list(day.normal_tasks) if day else []),
            ("backlog", list(snapshot.document.backlog)),
            ("completed", list(snapshot.document.completed)),
        ]
        self._visible_tasks = []
        for key, tasks in groups:
            self.query_one(f"#section-{key}", TaskSection).set_tasks(tasks)
            self._visible_tasks.extend(tasks)

        if self._visible_tasks:
            self._current = min(self._current, len(self._visible_tasks) - 1)
        else:
            self._current = 0
        # Rows are mounted after the next refresh
        self.call_after_refresh(lambda: self.call_after_refresh(self._update_focus))

    # --- Navigation ---

    def navigate_task(self, delta: int) -> None:
        if not self._visible_tasks:
            return
        self._current = max(0, min(self._current + delta, len(self._visible_tasks) - 1))
        self._update_focus()

    def change_day(self, delta: int) -> bool:
        """Move the day selection; False if there is no day there."""
        if self._snapshot is None:
            return False
        new_offset = 0 if delta == 0 else self._day_offset + delta
        try:
            resolve_day(
                self._snapshot.document,
                new_offset,
                self.app.task_service.today(),  # pyrefly: ignore[missing-attribute]
            )
        except TargetNotFoundError:
            return False
        self._day_offset = new_offset
        self._current = 0
        self.show_snapshot(self._snapshot)
        return True

    def _update_focus(self) -> None:
        task = self.get_current_task()
        if task is None:
            return
        for section in self.query(TaskSection):
            if task in section.tasks and section.focus_task(task):
                return

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        """Keep the cursor in sync with mouse focus."""
        widget = event.widget
        if isinstance(widget, TaskRow) and widget.task in self._visible_tasks:
            self._current = self._visible_tasks.index(widget.task)

    def get_current_task(self) -> Task | None:
        if 0 <= self._current < len(self._visible_tasks):
            return self._visible_tasks[self._current]
        return None

    # --- Form support ---

    def target_choices(self) -> list[tuple[str, Target]]:
        """Every place a task can be filed, labelled for the form."""
        if self._snapshot is None:
            return []
        document = self._snapshot.document
        today_index = find_today(document, self.app.task_service.today())  # pyrefly: ignore[missing-attribute]
        choices: list[tuple[str, Target]] = []
        for index, day in enumerate(document.days):
            for urgency in Urgency:
                choices.append(
                    (f"{day.title} / {URGENCY_TITLES[urgency]}", Target.day(index - today_index, urgency))
                )
        if document.backlog_header_line is not None:
            choices.append(("Backlog", Target.backlog()))
        choices.append(("Completed", Target.completed()))
        return choices

    def default_target(self) -> Target:
        if self._snapshot is None or not self._snapshot.document.days:
            return Target.backlog()
        return Target.day(self._day_offset, Urgency.NORMAL)
