"""Domain errors — custom exceptions for the document editor.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class DocEditorError(Exception):
    """Base exception for all document editor errors."""


class DocumentFormatError(DocEditorError):
    """Raised when a serialized document cannot be parsed into elements."""


class ConfigurationError(DocEditorError):
    """Raised when configuration is invalid or names an unknown backend."""


class StorageError(DocEditorError):
    """Raised on request when a storage backend reports a failed save."""
