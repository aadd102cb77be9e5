"""Parsed task document model."""

from pydantic import BaseModel, ConfigDict

from .task import Task, TaskCounts


class DaySection(BaseModel):
    """A weekday block holding that day's tasks by urgency."""

    model_config = ConfigDict(frozen=True)

    day_name: str  # "Monday" .. "Sunday"
    date: str = ""  # free text after the comma, e.g. "Feb 16"
    header_line: int
    must_header_line: int | None = None
    should_header_line: int | None = None
    must_do: tuple[Task, ...] = ()
    should_do: tuple[Task, ...] = ()
    normal_tasks: tuple[Task, ...] = ()

    @property
    def title(self) -> str:
        if self.date:
            return f"{self.day_name}, {self.date}"
        return self.day_name

    @property
    def tasks(self) -> list[Task]:
        """All tasks of the day in document order."""
        return sorted(
            [*self.must_do, *self.should_do, *self.normal_tasks],
            key=lambda t: t.source_line,
        )


class TaskDocument(BaseModel):
    """Read-only projection of a task document.

    ``lines`` is the source of truth; everything else is derived from it
    by the parser and is discarded after every mutation.
    """

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = ()
    newline: str = "\n"
    days: tuple[DaySection, ...] = ()
    backlog: tuple[Task, ...] = ()
    completed: tuple[Task, ...] = ()
    backlog_header_line: int | None = None
    completed_header_line: int | None = None
    ignored_lines: int = 0  # lines matching no pattern

    def all_tasks(self) -> list[Task]:
        """Every parsed task in document order."""
        tasks: list[Task] = [*self.backlog, *self.completed]
        for day in self.days:
            tasks.extend(day.tasks)
        return sorted(tasks, key=lambda t: t.source_line)

    def get_task(self, task_id: str) -> Task | None:
        for task in self.all_tasks():
            if task.id == task_id:
                return task
        return None

    def counts(self) -> TaskCounts:
        tasks = self.all_tasks()
        done = sum(1 for t in tasks if t.completed)
        return TaskCounts(pending=len(tasks) - done, completed=done)

    def to_lines(self) -> list[str]:
        """Mutable copy of the raw lines."""
        return list(self.lines)

    def serialize(self) -> str:
        return self.newline.join(self.lines)
