"""Lookups from the parsed model back to days, buckets and targets."""

from __future__ import annotations

from datetime import date

from ..errors import TargetNotFoundError
from ..models import Bucket, DaySection, Target, Task, TaskDocument
from ..utils import local_today, weekday_name


def find_today(document: TaskDocument, today: date | None = None) -> int:
    """Index of the day section for today's weekday, 0 if there is none."""
    name = weekday_name(today or local_today()).lower()
    for index, day in enumerate(document.days):
        if day.day_name.lower() == name:
            return index
    return 0


def today_section(document: TaskDocument, today: date | None = None) -> DaySection | None:
    if not document.days:
        return None
    return document.days[find_today(document, today)]


def resolve_day(document: TaskDocument, day_offset: int, today: date | None = None) -> int:
    """Absolute day index for an offset relative to today.

    Raises:
        TargetNotFoundError: If no day section exists at that offset.
    """
    index = find_today(document, today) + day_offset
    if not document.days or index < 0 or index >= len(document.days):
        raise TargetNotFoundError(
            f"No day section at offset {day_offset:+d} "
            f"({len(document.days)} day section(s) in document)"
        )
    return index


def locate(document: TaskDocument, task: Task) -> Bucket | None:
    """Bucket holding ``task``, checked completed, then backlog, then days."""
    if task in document.completed:
        return Bucket.COMPLETED
    if task in document.backlog:
        return Bucket.BACKLOG
    for day in document.days:
        if task in day.must_do or task in day.should_do or task in day.normal_tasks:
            return Bucket.DAY
    return None


def target_for(document: TaskDocument, task: Task, today: date | None = None) -> Target:
    """Target that would re-file ``task`` where it currently is.

    Used to pre-populate the edit form.
    """
    bucket = locate(document, task)
    if bucket == Bucket.COMPLETED:
        return Target.completed()
    if bucket == Bucket.BACKLOG:
        return Target.backlog()
    if bucket == Bucket.DAY and task.day_index is not None:
        offset = task.day_index - find_today(document, today)
        return Target.day(offset, task.urgency)
    return Target.day(0, task.urgency)
