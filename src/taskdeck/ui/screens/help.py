"""Keyboard shortcut overlay."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Move",
        (
            ("k / Up", "Previous task"),
            ("j / Down", "Next task"),
            ("[ / ]", "Previous / next day"),
            ("t", "Back to today"),
        ),
    ),
    (
        "Edit",
        (
            ("Space", "Complete, or clear a completed checkbox"),
            ("n", "New task on the selected day"),
            ("e / Enter", "Edit text, category or placement"),
        ),
    ),
    (
        "File",
        (
            ("r", "Re-read the task file"),
            ("?", "This overlay"),
            ("q", "Quit"),
        ),
    ),
)

KEY_WIDTH = 12


def format_section(rows: tuple[tuple[str, str], ...]) -> str:
    """Render shortcut rows as aligned plain text."""
    return "\n".join(f"{key:<{KEY_WIDTH}}{description}" for key, description in rows)


class HelpScreen(ModalScreen):
    """Shortcut overlay; any key closes it."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > Vertical {
        width: 56;
        height: auto;
        padding: 1 2;
        background: $panel;
        border: round $accent;
    }

    HelpScreen .title {
        text-style: bold;
        color: $accent;
    }

    HelpScreen .rows {
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            for title, rows in HELP_SECTIONS:
                yield Static(title, classes="title")
                yield Static(format_section(rows), classes="rows", markup=False)

    def on_key(self, event) -> None:
        event.stop()
        self.dismiss()
