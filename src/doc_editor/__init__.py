"""In-memory document model with pluggable storage."""

from doc_editor.application.editor import DocumentEditor
from doc_editor.domain.models.document import Document
from doc_editor.domain.models.elements import (
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from doc_editor.domain.models.results import SaveResult

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentEditor",
    "ImageElement",
    "NewLineElement",
    "SaveResult",
    "TabSpaceElement",
    "TextElement",
]
