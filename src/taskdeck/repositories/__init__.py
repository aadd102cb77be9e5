"""Repository layer for data access."""

from .filesystem import DocumentRepository, DocumentWatcher
from .protocol import DocumentFile, DocumentStoreProtocol

__all__ = [
    "DocumentFile",
    "DocumentRepository",
    "DocumentStoreProtocol",
    "DocumentWatcher",
]
