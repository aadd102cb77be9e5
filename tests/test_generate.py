"""Tests for the generate command."""

from datetime import date
from pathlib import Path

import yaml

from taskdeck.cli.generate import CONFIG_HEADER, generate_config_yaml, run_generate, starter_document
from taskdeck.models import TaskDeckConfig
from taskdeck.tasklist import find_today, parse

TODAY = date(2026, 2, 16)


class TestGenerateConfigYaml:
    """Tests for generate_config_yaml."""

    def test_starts_with_header(self):
        assert generate_config_yaml().startswith(CONFIG_HEADER)

    def test_matches_default_config(self):
        data = yaml.safe_load(generate_config_yaml())
        assert TaskDeckConfig(**data) == TaskDeckConfig.default()

    def test_custom_tasks_file(self):
        data = yaml.safe_load(generate_config_yaml("todo.md"))
        assert data["tasks_file"] == "todo.md"


class TestStarterDocument:
    """Tests for the starter task file."""

    def test_parses_with_today_first(self):
        doc = parse(starter_document(TODAY))

        assert [d.title for d in doc.days] == ["Monday, Feb 16", "Tuesday, Feb 17"]
        assert find_today(doc, TODAY) == 0
        assert len(doc.days[0].must_do) == 1
        assert len(doc.days[0].should_do) == 1
        assert doc.backlog_header_line is not None
        assert doc.completed_header_line is not None


class TestRunGenerate:
    """Tests for run_generate."""

    def test_creates_both_files(self, tmp_path: Path, capsys):
        assert run_generate(tmp_path, TODAY) == 0

        assert (tmp_path / "taskdeck.yml").exists()
        assert (tmp_path / "tasks.md").read_text(encoding="utf-8") == starter_document(TODAY)
        assert "Generated config" in capsys.readouterr().out

    def test_second_run_does_nothing(self, tmp_path: Path, capsys):
        run_generate(tmp_path, TODAY)
        capsys.readouterr()

        assert run_generate(tmp_path, TODAY) == 1
        assert "Nothing to generate." in capsys.readouterr().out

    def test_uses_tasks_file_from_existing_config(self, tmp_path: Path):
        (tmp_path / "taskdeck.yml").write_text("tasks_file: notes/todo.md\n")

        assert run_generate(tmp_path, TODAY) == 0
        assert (tmp_path / "notes" / "todo.md").exists()

    def test_existing_task_file_untouched(self, tmp_path: Path):
        (tmp_path / "tasks.md").write_text("mine", encoding="utf-8")

        assert run_generate(tmp_path, TODAY) == 0
        assert (tmp_path / "tasks.md").read_text(encoding="utf-8") == "mine"

    def test_workspace_is_file(self, tmp_path: Path):
        target = tmp_path / "file"
        target.write_text("x")
        assert run_generate(target, TODAY) == 1

    def test_unreadable_config_falls_back_to_default_tasks_file(self, tmp_path: Path, capsys):
        (tmp_path / "taskdeck.yml").write_text("- not\n- a mapping\n")

        assert run_generate(tmp_path, TODAY) == 0
        assert (tmp_path / "tasks.md").exists()
        assert "must contain a mapping" in capsys.readouterr().out

    def test_invalid_yaml_config(self, tmp_path: Path, capsys):
        (tmp_path / "taskdeck.yml").write_text("tasks_file: [unclosed\n")

        assert run_generate(tmp_path, TODAY) == 0
        assert (tmp_path / "tasks.md").exists()
        assert "Invalid YAML" in capsys.readouterr().out
