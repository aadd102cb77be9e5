"""Parser for the markdown task document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..models import Bucket, DaySection, GrammarConfig, Task, TaskDocument, Urgency
from .grammar import TaskGrammar

logger = logging.getLogger(__name__)


def split_lines(text: str) -> tuple[list[str], str]:
    """Split document text into lines, remembering the newline style.

    A trailing newline yields a final empty line so that joining the
    lines reproduces the input exactly. Documents that mix CRLF and LF
    are split on LF and keep the carriage return on each CRLF line.
    """
    crlf = text.count("\r\n")
    if crlf and crlf == text.count("\n"):
        return text.split("\r\n"), "\r\n"
    if crlf:
        logger.warning("Document mixes CRLF and LF line endings (%d CRLF lines)", crlf)
    return text.split("\n"), "\n"


def serialize(lines: list[str] | tuple[str, ...], newline: str = "\n") -> str:
    """Join lines back into document text."""
    return newline.join(lines)


@dataclass
class _OpenDay:
    """Mutable accumulator for the day section being read."""

    day_name: str
    date: str
    header_line: int
    must_header_line: int | None = None
    should_header_line: int | None = None
    must_do: list[Task] = field(default_factory=list)
    should_do: list[Task] = field(default_factory=list)
    normal_tasks: list[Task] = field(default_factory=list)

    def add(self, task: Task) -> None:
        if task.urgency == Urgency.MUST:
            self.must_do.append(task)
        elif task.urgency == Urgency.SHOULD:
            self.should_do.append(task)
        else:
            self.normal_tasks.append(task)

    def close(self) -> DaySection:
        return DaySection(
            day_name=self.day_name,
            date=self.date,
            header_line=self.header_line,
            must_header_line=self.must_header_line,
            should_header_line=self.should_header_line,
            must_do=tuple(self.must_do),
            should_do=tuple(self.should_do),
            normal_tasks=tuple(self.normal_tasks),
        )


class TaskParser:
    """Single forward pass over the document lines.

    The parser never rewrites a line: the returned TaskDocument carries
    the original lines untouched alongside the derived model.
    """

    def __init__(self, grammar: GrammarConfig | TaskGrammar | None = None) -> None:
        if isinstance(grammar, TaskGrammar):
            self.grammar = grammar
        else:
            self.grammar = TaskGrammar(grammar)

    def parse(self, text: str) -> TaskDocument:
        """Parse document text into a TaskDocument."""
        lines, newline = split_lines(text)
        return self.parse_lines(lines, newline)

    def parse_lines(self, lines: list[str] | tuple[str, ...], newline: str = "\n") -> TaskDocument:
        """Parse already-split lines into a TaskDocument."""
        grammar = self.grammar

        section: Bucket | None = None
        urgency = Urgency.NORMAL
        open_day: _OpenDay | None = None

        days: list[DaySection] = []
        backlog: list[Task] = []
        completed: list[Task] = []
        backlog_header_line: int | None = None
        completed_header_line: int | None = None
        ignored = 0
        ordinal = 0

        for index, line in enumerate(lines):
            day_header = grammar.match_day_header(line)
            if day_header is not None:
                if open_day is not None:
                    days.append(open_day.close())
                day_name, date = day_header
                open_day = _OpenDay(day_name=day_name, date=date, header_line=index)
                section = Bucket.DAY
                urgency = Urgency.NORMAL
                continue

            if grammar.is_backlog_header(line):
                if open_day is not None:
                    days.append(open_day.close())
                    open_day = None
                section = Bucket.BACKLOG
                urgency = Urgency.NORMAL
                if backlog_header_line is None:
                    backlog_header_line = index
                continue

            if grammar.is_completed_header(line):
                if open_day is not None:
                    days.append(open_day.close())
                    open_day = None
                section = Bucket.COMPLETED
                urgency = Urgency.NORMAL
                if completed_header_line is None:
                    completed_header_line = index
                continue

            subsection = grammar.match_subsection(line)
            if subsection is not None:
                urgency = subsection
                if open_day is not None and section == Bucket.DAY:
                    if subsection == Urgency.MUST and open_day.must_header_line is None:
                        open_day.must_header_line = index
                    elif subsection == Urgency.SHOULD and open_day.should_header_line is None:
                        open_day.should_header_line = index
                continue

            task_line = grammar.match_task(line)
            if task_line is None:
                ignored += 1
                continue

            if section is None:
                # Preamble before any recognised section
                logger.debug("Dropping task outside any section at line %d", index)
                continue

            text = task_line.text
            completed_on = None
            if section == Bucket.COMPLETED:
                text, completed_on = grammar.split_completed_on(text)

            task = Task(
                id=f"t{ordinal}",
                text=text,
                completed=task_line.completed,
                category=task_line.category,
                urgency=urgency,
                source_line=index,
                bucket=section,
                day_index=len(days) if section == Bucket.DAY else None,
                completed_on=completed_on,
            )
            ordinal += 1

            if section == Bucket.COMPLETED:
                completed.append(task)
            elif section == Bucket.BACKLOG:
                backlog.append(task)
            elif open_day is not None:
                open_day.add(task)

        if open_day is not None:
            days.append(open_day.close())

        logger.debug(
            "Parsed %d lines: %d days, %d backlog, %d completed, %d ignored",
            len(lines),
            len(days),
            len(backlog),
            len(completed),
            ignored,
        )

        return TaskDocument(
            lines=tuple(lines),
            newline=newline,
            days=tuple(days),
            backlog=tuple(backlog),
            completed=tuple(completed),
            backlog_header_line=backlog_header_line,
            completed_header_line=completed_header_line,
            ignored_lines=ignored,
        )


def parse(text: str, grammar: GrammarConfig | None = None) -> TaskDocument:
    """Parse document text with the given (or default) grammar."""
    return TaskParser(grammar).parse(text)
