"""Document editor façade.

Composes an injected Document and StoragePort. The editor borrows both:
whoever constructs it owns their lifetime.

The rendered text is cached the first time ``render_document`` produces a
non-empty string. Adding elements afterwards does not refresh the cache,
so a later render returns the earlier text until ``clear_cache`` is called.
"""

from __future__ import annotations

from doc_editor.domain.models.document import Document
from doc_editor.domain.models.elements import (
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from doc_editor.domain.models.results import SaveResult
from doc_editor.domain.ports.storage import StoragePort


class DocumentEditor:
    """Client-facing editing, rendering and saving of one document."""

    def __init__(self, document: Document, storage: StoragePort) -> None:
        self._document = document
        self._storage = storage
        self._rendered_document = ""

    # -- Mutators ------------------------------------------------------------

    def add_text(self, text: str) -> None:
        self._document.add_element(TextElement(text=text))

    def add_image(self, path: str) -> None:
        self._document.add_element(ImageElement(path=path))

    def add_new_line(self) -> None:
        self._document.add_element(NewLineElement())

    def add_tab_space(self) -> None:
        self._document.add_element(TabSpaceElement())

    # -- Rendering & persistence ---------------------------------------------

    def render_document(self) -> str:
        """Return the rendered document, computing it only while the cache is empty."""
        if not self._rendered_document:
            self._rendered_document = self._document.render()
        return self._rendered_document

    def save_document(self) -> SaveResult:
        """Render (or reuse the cache) and hand the text to storage."""
        return self._storage.save(self.render_document())

    def clear_cache(self) -> None:
        """Drop the cached rendering so the next render reflects the document."""
        self._rendered_document = ""

    # -- Accessors -----------------------------------------------------------

    @property
    def document(self) -> Document:
        return self._document

    @property
    def storage(self) -> StoragePort:
        return self._storage
