"""Use Case: Populate Demo Document.

Drives an editor through the sequence of edits used for showcase runs.
"""

from doc_editor.application.editor import DocumentEditor


class PopulateDemoUseCase:
    """Fill an editor with sample text, layout and an image reference."""

    def execute(self, editor: DocumentEditor) -> DocumentEditor:
        """Apply the demo edits to *editor* and return it."""
        editor.add_text("Hello, world!")
        editor.add_new_line()
        editor.add_text("This is a real-world document editor example.")
        editor.add_new_line()
        editor.add_tab_space()
        editor.add_text("Indented text after a tab space.")
        editor.add_new_line()
        editor.add_image("picture.jpg")
        return editor
