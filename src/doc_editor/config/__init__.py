"""Editor configuration package."""

from doc_editor.config.loader import get_config, load_config
from doc_editor.config.models import EditorConfig

__all__ = ["EditorConfig", "get_config", "load_config"]
