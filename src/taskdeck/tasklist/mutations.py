"""Line-level edits implementing task operations.

Every operation takes the raw lines plus the TaskDocument parsed from
them and returns a new list of lines. Inputs are never modified, so a
failed operation leaves the caller's document exactly as it was.

A Task's ``source_line`` is only trusted for one step: an operation
performs at most one removal and then re-derives its insertion point
from the post-removal lines.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from ..errors import StaleTaskError, TargetNotFoundError, TaskValidationError
from ..models import Bucket, GrammarConfig, Target, Task, TaskDocument, TaskForm, Urgency
from ..utils import local_today, short_date_label
from .grammar import TaskGrammar
from .locator import resolve_day, target_for
from .parser import TaskParser, serialize

logger = logging.getLogger(__name__)


class TaskMutator:
    """Applies toggle/add/edit operations for one grammar."""

    def __init__(self, grammar: GrammarConfig | TaskGrammar | None = None) -> None:
        if isinstance(grammar, TaskGrammar):
            self.grammar = grammar
        else:
            self.grammar = TaskGrammar(grammar)
        self.parser = TaskParser(self.grammar)

    # --- Operations ---

    def toggle_completion(
        self,
        lines: Sequence[str],
        document: TaskDocument,
        task: Task,
        today: date | None = None,
    ) -> list[str]:
        """Complete a pending task or un-complete a completed one.

        Completing moves the line to the top of the Completed section
        (created at the end of the document if missing) with a date label.
        Un-completing clears the checkbox in place; the task stays where
        it is.
        """
        self._check_document(lines, document)
        self._check_task(lines, task)
        new_lines = list(lines)

        if task.completed:
            new_lines[task.source_line] = self.grammar.uncheck(new_lines[task.source_line])
            logger.debug("Uncompleted %s in place at line %d", task.id, task.source_line)
            return new_lines

        del new_lines[task.source_line]
        header = self._ensure_completed_header(new_lines)
        label = short_date_label(today or local_today())
        new_lines.insert(
            header + 1,
            self.grammar.format_task(task.category, task.text, completed=True, completed_on=label),
        )
        logger.debug("Completed %s: line %d -> %d", task.id, task.source_line, header + 1)
        return new_lines

    def add_task(
        self,
        lines: Sequence[str],
        document: TaskDocument,
        target: Target,
        form: TaskForm,
        today: date | None = None,
    ) -> list[str]:
        """Insert a new pending task after the target's anchor line."""
        form = self.validate_form(form)
        self._check_document(lines, document)

        new_lines = list(lines)
        position = self._insertion_point(new_lines, document, target, today)
        new_lines.insert(position, self.grammar.format_task(form.category, form.text))
        logger.debug("Added task at line %d (%s)", position, target.label)
        return new_lines

    def edit_task(
        self,
        lines: Sequence[str],
        document: TaskDocument,
        task: Task,
        form: TaskForm,
        target: Target | None = None,
        today: date | None = None,
    ) -> list[str]:
        """Replace a task with the form's text and category.

        When ``target`` is omitted or names the task's current location
        the line is rewritten in place, keeping its indentation, checkbox
        and completion label. Any other target removes the line and adds
        the form there as a new pending task.
        """
        form = self.validate_form(form)
        self._check_document(lines, document)
        self._check_task(lines, task)
        current = target_for(document, task, today)
        if target is None or target == current:
            new_lines = list(lines)
            new_lines[task.source_line] = self._rewrite(new_lines[task.source_line], task, form)
            logger.debug("Edited %s in place at line %d", task.id, task.source_line)
            return new_lines

        remaining = list(lines)
        del remaining[task.source_line]
        reparsed = self.parser.parse_lines(remaining, document.newline)
        return self.add_task(remaining, reparsed, target, form, today)

    def _rewrite(self, line: str, task: Task, form: TaskForm) -> str:
        indent = line[: len(line) - len(line.lstrip())]
        ending = "\r" if line.endswith("\r") else ""
        body = self.grammar.format_task(
            form.category, form.text, completed=task.completed, completed_on=task.completed_on
        )
        return f"{indent}{body}{ending}"

    # --- Validation ---

    def validate_form(self, form: TaskForm) -> TaskForm:
        """Normalise form input or raise TaskValidationError."""
        text = form.text.strip()
        if not text:
            raise TaskValidationError("Task text cannot be empty")
        if "\n" in text or "\r" in text:
            raise TaskValidationError("Task text must be a single line")

        category = form.category.strip().lower()
        if "[" in category or "]" in category:
            raise TaskValidationError(f"Invalid category '{form.category}'")
        if not category:
            if self.grammar.config.category_required:
                raise TaskValidationError("Category is required")
            category = self.grammar.config.default_category

        return TaskForm(text=text, category=category)

    def _check_document(self, lines: Sequence[str], document: TaskDocument) -> None:
        if tuple(lines) != document.lines:
            raise StaleTaskError("Document lines do not match the parsed model; re-parse first")

    def _check_task(self, lines: Sequence[str], task: Task) -> None:
        """Verify ``task.source_line`` still holds ``task``."""
        if not 0 <= task.source_line < len(lines):
            raise StaleTaskError(f"Line {task.source_line} is out of range for {task.id}")
        parsed = self.grammar.match_task(lines[task.source_line])
        if parsed is None:
            raise StaleTaskError(f"Line {task.source_line} is no longer a task")
        text = parsed.text
        completed_on = None
        if task.bucket == Bucket.COMPLETED:
            text, completed_on = self.grammar.split_completed_on(text)
        if (
            parsed.completed != task.completed
            or parsed.category != task.category
            or text != task.text
            or completed_on != task.completed_on
        ):
            raise StaleTaskError(f"Line {task.source_line} no longer holds {task.id}")

    # --- Anchors ---

    def _find_completed_header(self, lines: Sequence[str]) -> int | None:
        for index, line in enumerate(lines):
            if self.grammar.is_completed_header(line):
                return index
        return None

    def _ensure_completed_header(self, lines: list[str]) -> int:
        """Index of the Completed header, appending a section if absent."""
        header = self._find_completed_header(lines)
        if header is None:
            lines.extend(["", self.grammar.config.completed_header, ""])
            header = len(lines) - 2
        return header

    def _insertion_point(
        self,
        lines: list[str],
        document: TaskDocument,
        target: Target,
        today: date | None,
    ) -> int:
        """Index at which the new task line is inserted.

        May append a Completed section to ``lines``.
        """
        if target.kind == Bucket.BACKLOG:
            if document.backlog_header_line is None:
                raise TargetNotFoundError("Document has no Backlog section")
            return document.backlog_header_line + 1

        if target.kind == Bucket.COMPLETED:
            return self._ensure_completed_header(lines) + 1

        day = document.days[resolve_day(document, target.day_offset, today)]

        if target.urgency == Urgency.MUST:
            anchor = day.must_header_line
            return (anchor if anchor is not None else day.header_line) + 1

        if target.urgency == Urgency.SHOULD:
            anchor = day.should_header_line
            return (anchor if anchor is not None else day.header_line) + 1

        # Normal: after the last subsection header or task line before the
        # next level-2 header
        position = day.header_line + 1
        index = position
        while index < len(lines) and not self.grammar.is_section_header(lines[index]):
            if (
                self.grammar.is_subsection_header(lines[index])
                or self.grammar.match_task(lines[index]) is not None
            ):
                position = index + 1
            index += 1
        return position


_default_mutator = TaskMutator()


def toggle_completion(
    lines: Sequence[str],
    document: TaskDocument,
    task: Task,
    today: date | None = None,
) -> list[str]:
    """Toggle ``task`` using the default grammar."""
    return _default_mutator.toggle_completion(lines, document, task, today)


def add_task(
    lines: Sequence[str],
    document: TaskDocument,
    target: Target,
    form: TaskForm,
    today: date | None = None,
) -> list[str]:
    """Add a task using the default grammar."""
    return _default_mutator.add_task(lines, document, target, form, today)


def edit_task(
    lines: Sequence[str],
    document: TaskDocument,
    task: Task,
    form: TaskForm,
    target: Target | None = None,
    today: date | None = None,
) -> list[str]:
    """Edit a task using the default grammar."""
    return _default_mutator.edit_task(lines, document, task, form, target, today)


__all__ = [
    "TaskMutator",
    "add_task",
    "edit_task",
    "serialize",
    "toggle_completion",
]
