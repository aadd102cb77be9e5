"""taskdeck TUI Application."""

from functools import partial

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .errors import TaskDeckError
from .models import Task
from .repositories import DocumentRepository, DocumentWatcher
from .services import ConfigService, DocumentSnapshot, TaskService
from .ui.screens.help import HelpScreen
from .ui.screens.tasks import TasksScreen
from .ui.widgets import TaskFormModal
from .ui.widgets.task_form import FormResult


class TaskDeckApp(App):
    """taskdeck - Terminal dashboard for a markdown task list."""

    TITLE = "taskdeck"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("r", "refresh", "Reload", show=True),
        # Navigation
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("left_square_bracket", "prev_day", "← Day", show=True, key_display="["),
        Binding("right_square_bracket", "next_day", "Day →", show=True, key_display="]"),
        Binding("t", "today", "Today", show=False),
        # Task actions
        Binding("space", "toggle_task", "Done/Undo", show=True),
        Binding("n", "new_task", "New", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("enter", "edit_task", "Edit", show=False),
    ]

    SCREENS = {
        "tasks": TasksScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize repository and services."""
        self.config_service = ConfigService(self.settings.workspace_root)
        self.repository = DocumentRepository(self.settings.workspace_root)
        tasks_file = self.config_service.tasks_file
        self.task_service = TaskService(
            self.repository,
            tasks_file,
            self.config_service.get_grammar_config(),
        )
        self.watcher = DocumentWatcher(self.repository, tasks_file)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.sub_title = self.config_service.tasks_file
        if self.config_service.has_config_error:
            self.notify(self.config_service.config_error or "", severity="warning")
        self.push_screen("tasks")
        self.set_interval(self.settings.poll_interval, self._check_for_changes)

    def _check_for_changes(self) -> None:
        """Reload when the task file was changed by another program."""
        try:
            changed = self.watcher.poll()
        except TaskDeckError as e:
            self.log.warning(f"Cannot check task file: {e}")
            return
        screen = self.screen
        if changed and isinstance(screen, TasksScreen):
            screen.reload()

    def _apply(self, screen: TasksScreen, snapshot: DocumentSnapshot, message: str) -> None:
        """Show the result of a successful write."""
        self.watcher.mark_seen(snapshot.file.modified)
        screen.show_snapshot(snapshot)
        self.notify(message, timeout=2)

    # General actions
    def action_refresh(self) -> None:
        """Reload the task file."""
        screen = self.screen
        if isinstance(screen, TasksScreen):
            screen.reload()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_up(self) -> None:
        screen = self.screen
        if isinstance(screen, TasksScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        screen = self.screen
        if isinstance(screen, TasksScreen):
            screen.navigate_task(1)

    def action_prev_day(self) -> None:
        screen = self.screen
        if isinstance(screen, TasksScreen) and not screen.change_day(-1):
            self.bell()

    def action_next_day(self) -> None:
        screen = self.screen
        if isinstance(screen, TasksScreen) and not screen.change_day(1):
            self.bell()

    def action_today(self) -> None:
        screen = self.screen
        if isinstance(screen, TasksScreen):
            screen.change_day(0)

    # Task actions
    def action_toggle_task(self) -> None:
        """Complete the current task, or clear its checkbox if already done."""
        screen = self.screen
        if not isinstance(screen, TasksScreen):
            return

        task = screen.get_current_task()
        if task is None:
            return

        try:
            snapshot = self.task_service.toggle(task)
        except TaskDeckError as e:
            self.notify(str(e), severity="error")
            screen.reload()
            return

        self._apply(screen, snapshot, "Task reopened" if task.completed else "Task completed")

    def action_new_task(self) -> None:
        """Open the form for a new task on the selected day."""
        screen = self.screen
        if not isinstance(screen, TasksScreen) or screen.snapshot is None:
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormModal("New Task", screen.target_choices(), target=screen.default_target()),
            callback=self._handle_new_task,
        )

    def _handle_new_task(self, result: FormResult | None) -> None:
        if result is None:
            return
        screen = self.screen
        if not isinstance(screen, TasksScreen):
            return

        form, target = result
        try:
            snapshot = self.task_service.add(target, form)
        except TaskDeckError as e:
            self.notify(str(e), severity="error")
            return

        self._apply(screen, snapshot, f"Task added to {target.label}")

    def action_edit_task(self) -> None:
        """Open the form pre-filled with the current task."""
        screen = self.screen
        if not isinstance(screen, TasksScreen) or screen.snapshot is None:
            return

        task = screen.get_current_task()
        if task is None:
            return

        form, target = self.task_service.form_for(screen.snapshot, task)
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormModal("Edit Task", screen.target_choices(), form=form, target=target),
            callback=partial(self._handle_edit_task, task),
        )

    def _handle_edit_task(self, task: Task, result: FormResult | None) -> None:
        if result is None:
            return
        screen = self.screen
        if not isinstance(screen, TasksScreen):
            return

        form, target = result
        try:
            snapshot = self.task_service.edit(task, form, target)
        except TaskDeckError as e:
            self.notify(str(e), severity="error")
            screen.reload()
            return

        self._apply(screen, snapshot, "Task updated")


def run(settings: Settings | None = None) -> None:
    """Run the taskdeck application."""
    app = TaskDeckApp(settings)
    app.run()
