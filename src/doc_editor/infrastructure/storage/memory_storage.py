"""In-memory storage — keeps saved documents in a list."""

from __future__ import annotations

from typing import Optional

from doc_editor.domain.models.results import SaveResult
from doc_editor.domain.ports.storage import StoragePort


class MemoryStorage(StoragePort):
    """Record every saved string in process memory."""

    def __init__(self) -> None:
        self.saved: list[str] = []

    def save(self, data: str) -> SaveResult:
        self.saved.append(data)
        return SaveResult.ok("memory")

    @property
    def last(self) -> Optional[str]:
        """Most recently saved string, or ``None`` before the first save."""
        return self.saved[-1] if self.saved else None
