"""Document aggregate — an ordered sequence of elements.

Insertion order is rendering order and is never changed. Rendering walks
the sequence once and concatenates each element's fragment with no
separator; layout elements supply their own characters.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field, ValidationError

from doc_editor.domain.errors import DocumentFormatError
from doc_editor.domain.models.elements import DocumentElement, Element


class Document(BaseModel):
    """Ordered container that exclusively owns its elements."""

    elements: list[Element] = Field(default_factory=list)

    # -- Mutation ------------------------------------------------------------

    def add_element(self, element: DocumentElement) -> None:
        """Append *element* to the end of the document."""
        self.elements.append(element)

    # -- Rendering -----------------------------------------------------------

    def render(self) -> str:
        """Concatenate every element's rendering, in insertion order."""
        return "".join(element.render() for element in self.elements)

    # -- Read-only access ----------------------------------------------------

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[DocumentElement]:  # type: ignore[override]
        """Iterate over the elements in rendering order, not model fields."""
        return iter(list(self.elements))

    def iter_elements(self) -> Iterator[DocumentElement]:
        """Yield the elements in rendering order."""
        yield from self

    # -- Serialisation -------------------------------------------------------

    def to_json(self, indent: int | None = 2) -> str:
        """Return the document as a JSON string of tagged elements."""
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, raw: str) -> "Document":
        """Build a Document from JSON produced by :meth:`to_json`.

        Raises:
            DocumentFormatError: If *raw* is not valid JSON or contains an
                element that does not match any known kind.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise DocumentFormatError(f"Invalid document: {exc}") from exc
