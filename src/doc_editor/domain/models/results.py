"""Outcome of a storage save.

Storage backends never raise on I/O failure; they return a ``SaveResult``
so callers can react without inspecting logs or the destination.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from doc_editor.domain.errors import StorageError


class SaveResult(BaseModel):
    """Success flag, destination and error text of one save call."""

    model_config = ConfigDict(frozen=True)

    saved: bool = Field(..., description="True when the data was persisted in full")
    destination: str = Field(..., description="Where the data was (or would have been) written")
    error: Optional[str] = Field(None, description="Diagnostic text for a failed save")

    # -- Constructors --------------------------------------------------------

    @classmethod
    def ok(cls, destination: str) -> "SaveResult":
        return cls(saved=True, destination=destination)

    @classmethod
    def failed(cls, destination: str, error: str) -> "SaveResult":
        return cls(saved=False, destination=destination, error=error)

    # -- Convenience ---------------------------------------------------------

    def raise_for_error(self) -> None:
        """Raise :class:`StorageError` if the save reported an error."""
        if self.error is not None:
            raise StorageError(f"Could not save to {self.destination}: {self.error}")
