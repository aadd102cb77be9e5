"""Repository protocol for document storage backends."""

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel


class DocumentFile(BaseModel):
    """Contents and metadata of one workspace document."""

    path: Path
    text: str
    size: int = 0
    modified: float = 0.0  # st_mtime of the file when read


class DocumentStoreProtocol(Protocol):
    """Interface for reading and writing workspace documents.

    Paths are relative to the workspace root (e.g., "tasks.md").
    """

    def resolve(self, relative_path: str) -> Path:
        """Absolute path for a workspace-relative path."""
        ...

    def read(self, relative_path: str) -> DocumentFile:
        """Read a document.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            DocumentIOError: If it cannot be read.
        """
        ...

    def write(self, relative_path: str, text: str) -> None:
        """Replace a document's contents.

        Raises:
            DocumentIOError: If it cannot be written.
        """
        ...

    def modified_time(self, relative_path: str) -> float | None:
        """Modification time of a document, or None if it does not exist."""
        ...
