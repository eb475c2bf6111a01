"""Port: Storage — persist a rendered document somewhere.

This is a domain-level contract. Infrastructure adapters (file, database,
memory) implement this interface.
"""

from abc import ABC, abstractmethod

from doc_editor.domain.models.results import SaveResult


class StoragePort(ABC):
    """Contract for a sink that durably stores a finished string."""

    @abstractmethod
    def save(self, data: str) -> SaveResult:
        """Persist *data* and report the outcome.

        Implementations must not raise on I/O failure: they log a diagnostic
        and return a failed :class:`SaveResult` instead.
        """
        ...
