"""Tests for DocumentRepository and DocumentWatcher."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from taskdeck.errors import DocumentIOError, DocumentNotFoundError
from taskdeck.repositories import DocumentRepository, DocumentWatcher


@pytest.fixture
def repo(tmp_path: Path) -> DocumentRepository:
    """Create a repository with a temporary workspace."""
    return DocumentRepository(tmp_path)


class TestRead:
    """Tests for reading documents."""

    def test_read_returns_text_and_metadata(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "tasks.md").write_text("## Backlog\n", encoding="utf-8")

        file = repo.read("tasks.md")

        assert file.text == "## Backlog\n"
        assert file.size == len("## Backlog\n")
        assert file.modified > 0
        assert file.path == (tmp_path / "tasks.md").resolve()

    def test_read_preserves_crlf(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "tasks.md").write_bytes(b"a\r\nb\r\n")
        assert repo.read("tasks.md").text == "a\r\nb\r\n"

    def test_read_missing(self, repo: DocumentRepository):
        with pytest.raises(DocumentNotFoundError):
            repo.read("missing.md")

    def test_read_invalid_utf8(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "tasks.md").write_bytes(b"\xff\xfe bad")
        with pytest.raises(DocumentIOError) as exc_info:
            repo.read("tasks.md")
        assert exc_info.value.operation == "read"

    def test_read_subdirectory(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "notes").mkdir()
        (tmp_path / "notes" / "tasks.md").write_text("x", encoding="utf-8")
        assert repo.read("notes/tasks.md").text == "x"


class TestResolve:
    """Paths must stay inside the workspace."""

    def test_parent_escape_rejected(self, repo: DocumentRepository):
        with pytest.raises(DocumentIOError) as exc_info:
            repo.resolve("../outside.md")
        assert exc_info.value.operation == "resolve"

    def test_absolute_path_rejected(self, repo: DocumentRepository):
        with pytest.raises(DocumentIOError):
            repo.resolve("/etc/passwd")


class TestWrite:
    """Tests for atomic writes."""

    def test_write_then_read(self, repo: DocumentRepository, tmp_path: Path):
        repo.write("tasks.md", "- [ ] [a] x\r\n")
        assert (tmp_path / "tasks.md").read_bytes() == b"- [ ] [a] x\r\n"
        assert not (tmp_path / "tasks.md.tmp").exists()

    def test_write_replaces_existing(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "tasks.md").write_text("old", encoding="utf-8")
        repo.write("tasks.md", "new")
        assert repo.read("tasks.md").text == "new"

    def test_write_failure_keeps_original(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "tasks.md").write_text("old", encoding="utf-8")

        with patch("taskdeck.repositories.filesystem.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(DocumentIOError) as exc_info:
                repo.write("tasks.md", "new")

        assert exc_info.value.operation == "write"
        assert isinstance(exc_info.value.cause, OSError)
        assert (tmp_path / "tasks.md").read_text(encoding="utf-8") == "old"
        assert not (tmp_path / "tasks.md.tmp").exists()


class TestWatcher:
    """Tests for change detection."""

    def test_modified_time_missing(self, repo: DocumentRepository):
        assert repo.modified_time("missing.md") is None

    def test_poll_detects_external_change(self, repo: DocumentRepository, tmp_path: Path):
        path = tmp_path / "tasks.md"
        path.write_text("one", encoding="utf-8")
        watcher = DocumentWatcher(repo, "tasks.md")
        watcher.mark_seen()

        assert watcher.poll() is False

        path.write_text("two", encoding="utf-8")
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))

        assert watcher.poll() is True
        assert watcher.poll() is False

    def test_mark_seen_with_known_mtime(self, repo: DocumentRepository, tmp_path: Path):
        (tmp_path / "tasks.md").write_text("one", encoding="utf-8")
        watcher = DocumentWatcher(repo, "tasks.md")

        watcher.mark_seen(repo.read("tasks.md").modified)

        assert watcher.poll() is False

    def test_poll_reports_deletion(self, repo: DocumentRepository, tmp_path: Path):
        path = tmp_path / "tasks.md"
        path.write_text("one", encoding="utf-8")
        watcher = DocumentWatcher(repo, "tasks.md")
        watcher.mark_seen()

        path.unlink()

        assert watcher.poll() is True
