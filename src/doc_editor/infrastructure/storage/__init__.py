"""Storage adapters implementing StoragePort."""

from doc_editor.infrastructure.storage.database_storage import DatabaseStorage
from doc_editor.infrastructure.storage.file_storage import DEFAULT_FILE_NAME, FileStorage
from doc_editor.infrastructure.storage.memory_storage import MemoryStorage

__all__ = [
    "DEFAULT_FILE_NAME",
    "DatabaseStorage",
    "FileStorage",
    "MemoryStorage",
]
