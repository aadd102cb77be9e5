"""Filesystem-based repository for workspace documents."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import DocumentIOError, DocumentNotFoundError
from .protocol import DocumentFile

logger = logging.getLogger(__name__)


class DocumentRepository:
    """
    Repository for markdown documents stored under a workspace directory.

    Writes go through a temporary file and ``os.replace`` so a failed
    write never leaves a half-written document behind.
    """

    ENCODING = "utf-8"

    def __init__(self, workspace_root: Path) -> None:
        """
        Initialize repository.

        Args:
            workspace_root: Path to the workspace directory
        """
        self.workspace_root = workspace_root

    def resolve(self, relative_path: str) -> Path:
        """Absolute path for a workspace-relative path.

        Raises:
            DocumentIOError: If the path escapes the workspace.
        """
        path = Path(relative_path)
        if path.is_absolute():
            raise DocumentIOError("resolve", path, ValueError("path must be relative"))
        root = self.workspace_root.resolve()
        resolved = (root / path).resolve()
        try:
            resolved.relative_to(root)
        except ValueError as e:
            raise DocumentIOError("resolve", path, e) from e
        return resolved

    def read(self, relative_path: str) -> DocumentFile:
        """Read a document and its metadata."""
        path = self.resolve(relative_path)
        if not path.exists():
            raise DocumentNotFoundError(path)
        try:
            # newline="" keeps CRLF documents byte-identical
            with path.open(encoding=self.ENCODING, newline="") as f:
                text = f.read()
            stat = path.stat()
        except FileNotFoundError as e:
            raise DocumentNotFoundError(path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError("read", path, e) from e
        logger.debug("Read %s (%d bytes)", path, stat.st_size)
        return DocumentFile(path=path, text=text, size=stat.st_size, modified=stat.st_mtime)

    def write(self, relative_path: str, text: str) -> None:
        """Atomically replace a document's contents."""
        path = self.resolve(relative_path)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding=self.ENCODING, newline="") as f:
                f.write(text)
            os.replace(tmp, path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise DocumentIOError("write", path, e) from e
        logger.debug("Wrote %s (%d chars)", path, len(text))

    def modified_time(self, relative_path: str) -> float | None:
        path = self.resolve(relative_path)
        try:
            return path.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as e:
            raise DocumentIOError("stat", path, e) from e


class DocumentWatcher:
    """Detects external changes to one document by polling its mtime."""

    def __init__(self, repository: DocumentRepository, relative_path: str) -> None:
        self.repository = repository
        self.relative_path = relative_path
        self._last_seen: float | None = None

    def mark_seen(self, modified: float | None = None) -> None:
        """Record the current state so it is not reported as a change."""
        if modified is None:
            modified = self.repository.modified_time(self.relative_path)
        self._last_seen = modified

    def poll(self) -> bool:
        """Return True if the document changed since it was last seen."""
        current = self.repository.modified_time(self.relative_path)
        if current == self._last_seen:
            return False
        logger.info("Detected change in %s", self.relative_path)
        self._last_seen = current
        return True
