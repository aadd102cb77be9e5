"""Service for reading and mutating the task document."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import date

from pydantic import BaseModel, ConfigDict

from ..errors import DocumentIOError
from ..models import DaySection, GrammarConfig, Target, Task, TaskCounts, TaskDocument, TaskForm
from ..repositories import DocumentFile, DocumentStoreProtocol
from ..tasklist import TaskMutator, TaskParser, serialize, target_for, today_section
from ..utils import local_today

logger = logging.getLogger(__name__)

Mutation = Callable[[list[str], TaskDocument], list[str]]

_locks: dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(key: str) -> threading.Lock:
    """One lock per document path, shared by every service instance."""
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.Lock()
        return lock


class DocumentSnapshot(BaseModel):
    """A document as read from storage together with its parsed model."""

    model_config = ConfigDict(frozen=True)

    file: DocumentFile
    document: TaskDocument

    @property
    def text(self) -> str:
        return self.file.text


class TaskSummary(BaseModel):
    """Counts plus today's section, for headers and CLI output."""

    counts: TaskCounts
    today: DaySection | None = None
    backlog: int = 0


class TaskService:
    """Read-modify-write cycles against a single task document.

    Each mutation reads the current text, parses it, applies one
    operation, writes the result and re-parses it. Mutations of the
    same document are serialized with a per-path lock.
    """

    def __init__(
        self,
        repository: DocumentStoreProtocol,
        tasks_file: str,
        grammar: GrammarConfig | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.repository = repository
        self.tasks_file = tasks_file
        self.parser = TaskParser(grammar)
        self.mutator = TaskMutator(self.parser.grammar)
        self._clock = clock or local_today

    def today(self) -> date:
        return self._clock()

    def load(self) -> DocumentSnapshot:
        """Read and parse the task document."""
        file = self.repository.read(self.tasks_file)
        return DocumentSnapshot(file=file, document=self.parser.parse(file.text))

    def commit(self, operation: str, mutation: Mutation) -> DocumentSnapshot:
        """Apply ``mutation`` to a fresh read of the document and persist it.

        Nothing is written if the mutation raises. Read and write
        failures are re-raised as DocumentIOError naming ``operation``.
        """
        with _lock_for(str(self.repository.resolve(self.tasks_file))):
            try:
                snapshot = self.load()
            except DocumentIOError as e:
                logger.warning("%s: read failed: %s", operation, e)
                raise DocumentIOError(operation, e.path, e.cause) from e
            new_lines = mutation(snapshot.document.to_lines(), snapshot.document)
            text = serialize(new_lines, snapshot.document.newline)

            if text == snapshot.text:
                logger.debug("%s: no changes to write", operation)
                return snapshot

            try:
                self.repository.write(self.tasks_file, text)
            except DocumentIOError as e:
                logger.warning("%s: write failed: %s", operation, e)
                raise DocumentIOError(operation, e.path, e.cause) from e

            logger.info("%s: wrote %s", operation, self.tasks_file)
            return self.load()

    # --- Operations ---

    def toggle(self, task: Task) -> DocumentSnapshot:
        """Complete or un-complete a task."""
        today = self.today()
        return self.commit(
            "toggle",
            lambda lines, document: self.mutator.toggle_completion(lines, document, task, today),
        )

    def add(self, target: Target, form: TaskForm) -> DocumentSnapshot:
        """Add a new task at ``target``."""
        form = self.mutator.validate_form(form)
        today = self.today()
        return self.commit(
            "add",
            lambda lines, document: self.mutator.add_task(lines, document, target, form, today),
        )

    def edit(self, task: Task, form: TaskForm, target: Target | None = None) -> DocumentSnapshot:
        """Rewrite a task, optionally moving it to ``target``."""
        form = self.mutator.validate_form(form)
        today = self.today()
        return self.commit(
            "edit",
            lambda lines, document: self.mutator.edit_task(
                lines, document, task, form, target, today
            ),
        )

    # --- Queries ---

    def form_for(self, snapshot: DocumentSnapshot, task: Task) -> tuple[TaskForm, Target]:
        """Form values and target that describe ``task`` as it is filed."""
        form = TaskForm(text=task.text, category=task.category)
        return form, target_for(snapshot.document, task, self.today())

    def summary(self, snapshot: DocumentSnapshot) -> TaskSummary:
        document = snapshot.document
        return TaskSummary(
            counts=document.counts(),
            today=today_section(document, self.today()),
            backlog=len(document.backlog),
        )
