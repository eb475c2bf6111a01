"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from doc_editor.domain.models.document import Document
from doc_editor.domain.models.elements import (
    DocumentElement,
    Element,
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from doc_editor.domain.models.results import SaveResult

__all__ = [
    # Document
    "Document",
    # Elements
    "DocumentElement",
    "Element",
    "ImageElement",
    "NewLineElement",
    "TabSpaceElement",
    "TextElement",
    # Storage outcome
    "SaveResult",
]
