"""Document element models.

Each element kind is a separate frozen model whose type is fixed when it is
constructed. Rendering is a pure function of the element's own payload, so
an image reference is always rendered as an image and a text run is always
rendered verbatim, whatever the strings look like.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (abc, typing)
- Pydantic (pragmatic exception for serialization)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

NEW_LINE = "\n"
TAB_SPACE = "\t"


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class DocumentElement(BaseModel, ABC):
    """One unit of renderable document content."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def render(self) -> str:
        """Return this element's fragment of the rendered document."""
        ...


# ---------------------------------------------------------------------------
# Payload-carrying elements
# ---------------------------------------------------------------------------


class TextElement(DocumentElement):
    """A run of text, rendered exactly as given."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Text content (no escaping applied)")

    def render(self) -> str:
        return self.text


class ImageElement(DocumentElement):
    """A reference to an image, rendered as an ``[Image: ...]`` placeholder.

    The path is not checked for existence or extension.
    """

    kind: Literal["image"] = "image"
    path: str = Field(..., description="Image location as supplied by the caller")

    def render(self) -> str:
        return f"[Image: {self.path}]"


# ---------------------------------------------------------------------------
# Layout elements
# ---------------------------------------------------------------------------


class NewLineElement(DocumentElement):
    """A line break."""

    kind: Literal["newline"] = "newline"

    def render(self) -> str:
        return NEW_LINE


class TabSpaceElement(DocumentElement):
    """A single tab character."""

    kind: Literal["tab"] = "tab"

    def render(self) -> str:
        return TAB_SPACE


Element = Annotated[
    Union[TextElement, ImageElement, NewLineElement, TabSpaceElement],
    Field(discriminator="kind"),
]
