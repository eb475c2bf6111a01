"""Configuration loader for the document editor.

Loads a JSON configuration file and returns a validated EditorConfig
instance. Uses module-level caching so each file is only parsed once per
process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import platformdirs

from doc_editor.config.models import EditorConfig

_APP_NAME = "doc_editor"
_USER_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, EditorConfig] = {}

# Default config path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "editor_default.json"


def user_config_path() -> Path:
    """Per-user config file location (may not exist)."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _USER_CONFIG_FILENAME


def load_config(path: Optional[Path | str] = None) -> EditorConfig:
    """Load and validate editor config from a JSON file.

    Parameters
    ----------
    path : Path | str | None
        Path to a custom JSON config file. If ``None``, the per-user
        ``config.json`` is used when present, otherwise the built-in
        ``editor_default.json``.

    Returns
    -------
    EditorConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If an explicitly given path does not exist.
    pydantic.ValidationError
        If the JSON content does not match the expected schema.
    """
    if path is not None:
        config_path = Path(path)
    else:
        candidate = user_config_path()
        config_path = candidate if candidate.is_file() else _DEFAULT_CONFIG_PATH

    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    config = EditorConfig.model_validate(raw)
    _config_cache[cache_key] = config
    return config


def get_config() -> EditorConfig:
    """Get the default editor configuration (cached)."""
    return load_config()


def default_config_path() -> Path:
    """Path of the built-in configuration file."""
    return _DEFAULT_CONFIG_PATH


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
