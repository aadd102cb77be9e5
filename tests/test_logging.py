"""Tests for logging setup and the help overlay text."""

import logging
from pathlib import Path

import pytest

from taskdeck.app import TaskDeckApp
from taskdeck.logging import setup_logging
from taskdeck.ui.screens.help import HELP_SECTIONS, KEY_WIDTH, format_section


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    setup_logging(0, None)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_silent_by_default(self):
        logger = setup_logging(0, None)
        assert logger.handlers == []

    def test_log_file_only(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "taskdeck.log"

        logger = setup_logging(0, log_file)
        logging.getLogger("taskdeck.services").info("hello from a module")
        for handler in logger.handlers:
            handler.flush()

        assert [type(h) for h in logger.handlers] == [logging.FileHandler]
        text = log_file.read_text(encoding="utf-8")
        assert "started (level=INFO)" in text
        assert "hello from a module" in text

    def test_debug_level_and_no_duplicate_handlers(self):
        setup_logging(2, None)
        logger = setup_logging(2, None)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1


class TestHelpSections:
    """Tests for the shortcut overlay content."""

    def test_rows_are_aligned(self):
        text = format_section((("q", "Quit"), ("e / Enter", "Edit")))
        assert text.splitlines() == ["q".ljust(KEY_WIDTH) + "Quit", "e / Enter".ljust(KEY_WIDTH) + "Edit"]

    def test_listed_single_keys_are_bound(self):
        bound = {binding.key_display or binding.key for binding in TaskDeckApp.BINDINGS}
        listed = {
            key
            for _title, rows in HELP_SECTIONS
            for keys, _description in rows
            for key in keys.split(" / ")
            if len(key) == 1
        }
        assert listed <= bound
