"""Application layer — use cases over the domain ports."""

from doc_editor.application.editor import DocumentEditor

__all__ = ["DocumentEditor"]
