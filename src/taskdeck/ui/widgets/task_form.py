"""Add/edit task modal."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select

from ...models import Target, TaskForm

FormResult = tuple[TaskForm, Target]


class TaskFormModal(ModalScreen[FormResult | None]):
    """Modal dialog collecting task text, category and target."""

    DEFAULT_CSS = """
    TaskFormModal {
        align: center middle;
    }

    TaskFormModal > Vertical {
        width: 64;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    TaskFormModal .form-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    TaskFormModal Input, TaskFormModal Select {
        margin-bottom: 1;
    }

    TaskFormModal .buttons {
        width: 100%;
        height: auto;
    }

    TaskFormModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(
        self,
        title: str,
        targets: list[tuple[str, Target]],
        form: TaskForm | None = None,
        target: Target | None = None,
    ) -> None:
        """Initialize the form.

        Args:
            title: Dialog title ("New Task" / "Edit Task")
            targets: Selectable (label, target) pairs
            form: Initial values when editing
            target: Initially selected target
        """
        super().__init__()
        self._title = title
        self._targets = targets
        self._form = form or TaskForm(text="")
        self._initial = self._target_index(target)

    def _target_index(self, target: Target | None) -> int:
        if target is not None:
            for index, (_label, candidate) in enumerate(self._targets):
                if candidate == target:
                    return index
        return 0

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self._title, classes="form-title")
            yield Input(value=self._form.text, placeholder="Task", id="task-text")
            yield Input(value=self._form.category, placeholder="category (e.g. ops)", id="task-category")
            yield Select(
                [(label, index) for index, (label, _target) in enumerate(self._targets)],
                value=self._initial,
                allow_blank=False,
                id="task-target",
            )
            with Center(classes="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#task-text", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.action_save()
        else:
            self.action_cancel()

    def action_save(self) -> None:
        text = self.query_one("#task-text", Input).value
        category = self.query_one("#task-category", Input).value
        selected = self.query_one("#task-target", Select).value
        index = selected if isinstance(selected, int) else 0
        self.dismiss((TaskForm(text=text, category=category), self._targets[index][1]))

    def action_cancel(self) -> None:
        self.dismiss(None)
