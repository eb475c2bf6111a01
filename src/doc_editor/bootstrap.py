"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from doc_editor.application.editor import DocumentEditor
from doc_editor.config.models import EditorConfig, StorageConfig
from doc_editor.domain.errors import ConfigurationError
from doc_editor.domain.models.document import Document
from doc_editor.domain.ports.config_provider import ConfigProviderPort
from doc_editor.domain.ports.storage import StoragePort
from doc_editor.infrastructure.config.json_config_provider import JsonConfigProvider
from doc_editor.infrastructure.storage.database_storage import DatabaseStorage
from doc_editor.infrastructure.storage.file_storage import FileStorage
from doc_editor.infrastructure.storage.memory_storage import MemoryStorage


def build_storage(settings: StorageConfig) -> StoragePort:
    """Instantiate the storage adapter named by *settings.backend*."""
    if settings.backend == "file":
        return FileStorage(settings.file_path, encoding=settings.encoding)
    if settings.backend == "database":
        return DatabaseStorage(settings.dsn)
    if settings.backend == "memory":
        return MemoryStorage()
    raise ConfigurationError(f"Unknown storage backend: {settings.backend!r}")


class Container:
    """Simple dependency injection container.

    Wires the configured storage adapter to the storage port and hands out
    editors bound to it.

    Usage::

        container = Container()
        editor = container.new_editor()
        editor.add_text("Hello")
        editor.save_document()
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        storage_backend: Optional[str] = None,
        output_path: str | Path | None = None,
    ) -> None:
        self._config_provider = JsonConfigProvider(config_path)
        self._config: EditorConfig = self._config_provider.get_config()

        storage_settings = self._config.storage
        if storage_backend is not None:
            storage_settings = storage_settings.model_copy(update={"backend": storage_backend})
        if output_path is not None:
            # an explicit output path always means a file sink
            storage_settings = storage_settings.model_copy(
                update={"backend": "file", "file_path": str(output_path)}
            )
        self._storage = build_storage(storage_settings)

    # -- Port accessors ------------------------------------------------------

    @property
    def config_provider(self) -> ConfigProviderPort:
        return self._config_provider

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def storage(self) -> StoragePort:
        return self._storage

    # -- Factories -----------------------------------------------------------

    def new_editor(self, document: Optional[Document] = None) -> DocumentEditor:
        """Create an editor over *document* (a fresh one if omitted)."""
        if document is None:
            document = Document()
        return DocumentEditor(document, self._storage)
