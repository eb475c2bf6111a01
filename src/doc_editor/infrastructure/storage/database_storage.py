"""Database storage — placeholder StoragePort implementation.

There is no database backend. The class exists so callers can select it
and code against the same contract; it persists nothing.
"""

from __future__ import annotations

import logging
from typing import Optional

from doc_editor.domain.models.results import SaveResult
from doc_editor.domain.ports.storage import StoragePort

logger = logging.getLogger(__name__)


class DatabaseStorage(StoragePort):
    """No-op sink standing in for a future database backend."""

    def __init__(self, dsn: Optional[str] = None) -> None:
        self._dsn = dsn

    def save(self, data: str) -> SaveResult:
        destination = self._dsn or "database"
        logger.warning(
            "Database storage is a placeholder; %d characters not persisted to %s",
            len(data),
            destination,
        )
        return SaveResult(saved=False, destination=destination)
