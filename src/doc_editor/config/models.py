"""Pydantic models for editor configuration.

These models validate and type the JSON configuration file that selects
the storage backend and the log level.
"""

from __future__ import annotations

import codecs
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

StorageBackend = Literal["file", "database", "memory"]


class StorageBackendChoice(str, Enum):
    """Storage backends selectable from the command line."""

    FILE = "file"
    DATABASE = "database"
    MEMORY = "memory"


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StorageConfig(BaseModel):
    """Which sink receives saved documents, and where."""

    backend: StorageBackend = "file"
    file_path: str = Field("document.txt", min_length=1)
    encoding: Optional[str] = Field(None, description="None uses the platform default")
    dsn: Optional[str] = Field(None, description="Connection string for the database placeholder")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding {value!r}") from None
        return value


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    """Root logger settings applied by the CLI."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
        return upper


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class EditorConfig(BaseModel):
    """Root configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
