"""File storage — implements StoragePort by writing a text file.

The data is encoded before the destination is opened, so text the codec
cannot represent leaves the previous file untouched. The destination is
truncated and rewritten on every save. Any failure is reported through
the log and the returned ``SaveResult``; the error is never raised to the
caller.
"""

from __future__ import annotations

import locale
import logging
from pathlib import Path
from typing import Optional

from doc_editor.domain.models.results import SaveResult
from doc_editor.domain.ports.storage import StoragePort

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "document.txt"


class FileStorage(StoragePort):
    """Persist rendered documents to a single file.

    Parameters
    ----------
    path : Path | str
        Destination file, relative paths resolve against the working
        directory. Defaults to ``document.txt``.
    encoding : str | None
        Text encoding; ``None`` uses the platform default.
    """

    def __init__(
        self,
        path: Path | str = DEFAULT_FILE_NAME,
        encoding: Optional[str] = None,
    ) -> None:
        self._path = Path(path)
        self._encoding = encoding

    def save(self, data: str) -> SaveResult:
        """Overwrite the destination with *data*."""
        destination = str(self._path)
        encoding = self._encoding or locale.getpreferredencoding(False)
        try:
            payload = data.encode(encoding)
        except (UnicodeError, LookupError) as exc:
            logger.error("Unable to encode document for %s as %s: %s", destination, encoding, exc)
            return SaveResult.failed(destination, str(exc))

        try:
            with open(self._path, "wb") as fh:
                fh.write(payload)
        except OSError as exc:
            logger.error("Unable to open %s for writing: %s", destination, exc)
            return SaveResult.failed(destination, str(exc))

        logger.info("Document saved to %s", destination)
        return SaveResult.ok(destination)

    @property
    def path(self) -> Path:
        """Destination file path."""
        return self._path
