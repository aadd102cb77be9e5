"""Line patterns for the markdown task dialect.

Recognised lines:
- "## Monday, Feb 16"            day header
- "## Backlog"                   backlog header
- "## Completed (Recent)"        completed header (prefix match)
- "### 🔴 Must Do Today"         must-do subsection
- "### 🟡 Should Do Today"       should-do subsection
- "- [ ] [ops] Ship report"      task line

Everything else is free text and is never rewritten.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import GrammarConfig, Urgency
from ..utils import WEEKDAYS


@dataclass(frozen=True)
class TaskLine:
    """Fields of a matched task line."""

    completed: bool
    category: str
    text: str


class TaskGrammar:
    """Compiled patterns for one GrammarConfig."""

    DAY_PATTERN = re.compile(
        r"^##\s+(" + "|".join(WEEKDAYS) + r"),\s*(.*?)\s*$",
        re.IGNORECASE,
    )
    BACKLOG_PATTERN = re.compile(r"^##\s+backlog\s*$", re.IGNORECASE)
    COMPLETED_PATTERN = re.compile(r"^##\s+completed", re.IGNORECASE)
    SECTION_PATTERN = re.compile(r"^##\s")
    SUBSECTION_PATTERN = re.compile(r"^###\s+(.*)$")

    STRICT_TASK_PATTERN = re.compile(r"^\s*-\s+\[([ xX])\]\s+\[([^\[\]]+)\]\s+(.*?)\s*$")
    LOOSE_TASK_PATTERN = re.compile(
        r"^\s*[-*]\s+\[([ xX])\]\s+(?:\[([^\[\]]+)\]\s+)?(.*?)\s*$"
    )
    CHECKBOX_PATTERN = re.compile(r"\[([ xX])\]")
    COMPLETED_ON_PATTERN = re.compile(r"^(.*?)\s+\(([^()]+)\)$")

    def __init__(self, config: GrammarConfig | None = None) -> None:
        self.config = config or GrammarConfig()
        if self.config.category_required:
            self._task_pattern = self.STRICT_TASK_PATTERN
        else:
            self._task_pattern = self.LOOSE_TASK_PATTERN

    # --- Headers ---

    def match_day_header(self, line: str) -> tuple[str, str] | None:
        """Return (day_name, date) for a day header line."""
        match = self.DAY_PATTERN.match(line)
        if not match:
            return None
        return match.group(1).capitalize(), match.group(2)

    def is_backlog_header(self, line: str) -> bool:
        return bool(self.BACKLOG_PATTERN.match(line))

    def is_completed_header(self, line: str) -> bool:
        return bool(self.COMPLETED_PATTERN.match(line))

    def is_section_header(self, line: str) -> bool:
        """Any level-2 header, recognised or not."""
        return bool(self.SECTION_PATTERN.match(line))

    def is_subsection_header(self, line: str) -> bool:
        return bool(self.SUBSECTION_PATTERN.match(line))

    def match_subsection(self, line: str) -> Urgency | None:
        """Urgency opened by a level-3 header, keyed on caption text only."""
        if not self.config.urgency_subsections:
            return None
        match = self.SUBSECTION_PATTERN.match(line)
        if not match:
            return None
        caption = match.group(1).lower()
        if self.config.must_caption.lower() in caption:
            return Urgency.MUST
        if self.config.should_caption.lower() in caption:
            return Urgency.SHOULD
        return None

    # --- Tasks ---

    def match_task(self, line: str) -> TaskLine | None:
        match = self._task_pattern.match(line)
        if not match:
            return None
        marker, category, text = match.groups()
        text = text.strip()
        category = (category or "").strip().lower()
        if not text:
            return None
        if not category:
            if self.config.category_required:
                return None
            category = self.config.default_category
        return TaskLine(completed=marker in "xX", category=category, text=text)

    def split_completed_on(self, text: str) -> tuple[str, str | None]:
        """Split a trailing "(Feb 16)" label off a completed-log entry."""
        match = self.COMPLETED_ON_PATTERN.match(text)
        if not match:
            return text, None
        return match.group(1).strip(), match.group(2).strip()

    def format_task(
        self,
        category: str,
        text: str,
        completed: bool = False,
        completed_on: str | None = None,
    ) -> str:
        """Render a task line in the configured dialect."""
        marker = "x" if completed else " "
        parts = [f"- [{marker}]"]
        if self.config.category_required or category != self.config.default_category:
            parts.append(f"[{category}]")
        parts.append(text)
        line = " ".join(parts)
        if completed_on:
            line = f"{line} ({completed_on})"
        return line

    def uncheck(self, line: str) -> str:
        """Clear the first checkbox on a line, leaving the rest verbatim."""
        return self.CHECKBOX_PATTERN.sub("[ ]", line, count=1)
