"""Infrastructure layer — external adapters."""

from doc_editor.infrastructure.config.json_config_provider import JsonConfigProvider
from doc_editor.infrastructure.storage.database_storage import DatabaseStorage
from doc_editor.infrastructure.storage.file_storage import FileStorage
from doc_editor.infrastructure.storage.memory_storage import MemoryStorage

__all__ = [
    "DatabaseStorage",
    "FileStorage",
    "JsonConfigProvider",
    "MemoryStorage",
]
