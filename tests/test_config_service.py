"""Tests for ConfigService."""

from pathlib import Path

import pytest

from taskdeck.models import GrammarConfig, TaskDeckConfig
from taskdeck.services import ConfigService


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    return tmp_path


def write_config(workspace: Path, content: str) -> None:
    (workspace / "taskdeck.yml").write_text(content)


class TestConfigServiceLoading:
    """Tests for loading taskdeck.yml."""

    def test_missing_file_uses_defaults(self, workspace: Path):
        service = ConfigService(workspace)
        assert service.get_config() == TaskDeckConfig.default()
        assert service.has_config_error is False

    def test_loads_custom_values(self, workspace: Path):
        write_config(
            workspace,
            "tasks_file: notes/todo.md\n"
            "grammar:\n"
            "  category_required: false\n"
            "  default_category: Misc\n",
        )
        service = ConfigService(workspace)

        assert service.tasks_file == "notes/todo.md"
        grammar = service.get_grammar_config()
        assert grammar.category_required is False
        assert grammar.default_category == "misc"
        assert grammar.urgency_subsections is True

    def test_empty_file_reports_error(self, workspace: Path):
        write_config(workspace, "")
        service = ConfigService(workspace)

        assert service.get_config() == TaskDeckConfig.default()
        assert service.config_error == "taskdeck.yml is empty"

    def test_invalid_yaml(self, workspace: Path):
        write_config(workspace, "tasks_file: [unclosed\n")
        service = ConfigService(workspace)

        assert service.tasks_file == "tasks.md"
        assert service.config_error.startswith("Invalid YAML")

    def test_non_mapping(self, workspace: Path):
        write_config(workspace, "- a\n- b\n")
        service = ConfigService(workspace)

        service.get_config()
        assert service.has_config_error

    def test_validation_error_falls_back(self, workspace: Path):
        write_config(workspace, "tasks_file: tasks.txt\n")
        service = ConfigService(workspace)

        assert service.tasks_file == "tasks.md"
        assert service.config_error.startswith("Invalid taskdeck.yml")

    def test_reload_picks_up_changes(self, workspace: Path):
        service = ConfigService(workspace)
        assert service.tasks_file == "tasks.md"

        write_config(workspace, "tasks_file: other.md\n")
        assert service.tasks_file == "tasks.md"  # cached

        service.reload()
        assert service.tasks_file == "other.md"


class TestGrammarConfig:
    """Tests for grammar validation."""

    def test_defaults(self):
        grammar = GrammarConfig()
        assert grammar.category_required is True
        assert grammar.completed_header == "## Completed (Recent)"

    def test_loose(self):
        grammar = GrammarConfig.loose()
        assert grammar.category_required is False
        assert grammar.urgency_subsections is False

    @pytest.mark.parametrize("value", ["", "[x]"])
    def test_invalid_default_category(self, value: str):
        with pytest.raises(ValueError):
            GrammarConfig(default_category=value)

    def test_completed_title_must_be_recognisable(self):
        with pytest.raises(ValueError):
            GrammarConfig(completed_title="Done")
