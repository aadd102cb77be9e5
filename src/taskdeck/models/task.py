"""Task domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Urgency(str, Enum):
    """Urgency tier of a task within its day."""

    MUST = "must"
    SHOULD = "should"
    NORMAL = "normal"


class Bucket(str, Enum):
    """Structural bucket a task was filed under."""

    DAY = "day"
    BACKLOG = "backlog"
    COMPLETED = "completed"


class Task(BaseModel):
    """A single checklist entry parsed from the task document."""

    model_config = ConfigDict(frozen=True)

    id: str  # e.g. "t0", "t7" - ordinal among parsed tasks, rebuilt every parse
    text: str
    completed: bool = False
    category: str
    urgency: Urgency = Urgency.NORMAL
    source_line: int  # 0-indexed; only valid until the document changes
    bucket: Bucket
    day_index: int | None = None
    completed_on: str | None = None  # e.g. "Feb 16", completed section only

    @property
    def display_text(self) -> str:
        """Text with the completion label, as written in the document."""
        if self.completed_on:
            return f"{self.text} ({self.completed_on})"
        return self.text


class TaskForm(BaseModel):
    """User input for adding or editing a task."""

    text: str
    category: str = ""


class Target(BaseModel):
    """Where a new or edited task should be written.

    Day targets are relative to today: ``day_offset=0`` is today's
    section, ``1`` the section after it, and so on.
    """

    kind: Bucket = Bucket.DAY
    day_offset: int = 0
    urgency: Urgency = Urgency.NORMAL

    @classmethod
    def backlog(cls) -> "Target":
        return cls(kind=Bucket.BACKLOG)

    @classmethod
    def completed(cls) -> "Target":
        return cls(kind=Bucket.COMPLETED)

    @classmethod
    def day(cls, day_offset: int = 0, urgency: Urgency = Urgency.NORMAL) -> "Target":
        return cls(kind=Bucket.DAY, day_offset=day_offset, urgency=urgency)

    @property
    def label(self) -> str:
        """Short human-readable description."""
        if self.kind != Bucket.DAY:
            return self.kind.value.title()
        if self.day_offset == 0:
            day = "Today"
        else:
            day = f"Today {self.day_offset:+d}"
        return f"{day} / {self.urgency.value}"


class TaskCounts(BaseModel):
    """Pending/completed totals shown in summaries."""

    pending: int = 0
    completed: int = 0
