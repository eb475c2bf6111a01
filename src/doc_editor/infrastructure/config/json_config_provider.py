"""JSON config provider — implements ConfigProviderPort.

Wraps the config/loader.py logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from doc_editor.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load editor configuration from JSON files, lazily."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        self._config_path = config_path
        self._config: Any = None

    def get_config(self) -> Any:
        """Return the current editor configuration, loading on first use."""
        if self._config is None:
            from doc_editor.config.loader import load_config

            self._config = load_config(self._config_path)
        return self._config
