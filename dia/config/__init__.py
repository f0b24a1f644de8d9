"""
Load configuration from YAML. Constants for the shell live here too.
Layers: built-in defaults, <config-dir>/config.yaml, DIA_CONFIG, then --config <file>.
"""
import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from dia.exceptions import ConfigDirError
from dia.utils.paths import app_config_dir

logger = logging.getLogger(__name__)

_CACHE: dict[str, Any] | None = None

APP_NAME = "dia"
MAX_RECENT = 10
RECENT_FILES_NAME = "recent-files.json"
CONFIG_FILE_NAME = "config.yaml"
ENV_CONFIG = "DIA_CONFIG"
ENV_LOG_LEVEL = "DIA_LOG_LEVEL"
ENV_LOG_DIR = "DIA_LOG_DIR"

DEFAULT_FILENAME = "diagram.mmd"
OPEN_FILTERS = (
    ("Mermaid", ("*.mmd", "*.mermaid")),
    ("All Files", ("*",)),
)
SAVE_FILTERS = (
    ("Mermaid", ("*.mmd",)),
    ("All Files", ("*",)),
)

# (theme id, menu label)
THEMES = (
    ("default", "Default"),
    ("dark", "Dark"),
    ("forest", "Forest"),
    ("neutral", "Neutral"),
    ("catppuccin", "Catppuccin"),
    ("dracula", "Dracula"),
    ("nord", "Nord"),
    ("synthwave", "Synthwave"),
    ("rose", "Rose"),
    ("ocean", "Ocean"),
    ("solarized", "Solarized"),
)
THEME_IDS = tuple(t for t, _ in THEMES)


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "window": {"width": 1280, "height": 800, "min_width": 800, "min_height": 600},
        "editor": {"font_family": "Monospace", "font_size": 14, "theme": "default"},
        "log_level": "INFO",
    }


def user_config_path() -> Path | None:
    """Path of the user config.yaml, or None when no config dir can be resolved."""
    try:
        return app_config_dir() / CONFIG_FILE_NAME
    except ConfigDirError as e:
        logger.warning("No user config directory: %s", e)
        return None


def load_config(override_path: str | Path | None = None) -> dict:
    """
    Load config: defaults + user config.yaml + env DIA_CONFIG + optional override file.
    Returns merged dict. Cached after first call unless override_path is given.
    """
    global _CACHE
    if override_path is not None:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    user_file = user_config_path()
    if user_file is not None:
        base = _deep_merge(base, _load_yaml(user_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    if override_path is not None:
        p = Path(override_path)
        if p.exists():
            base = _deep_merge(base, _load_yaml(p))

    # Unknown diagram themes fall back to the default one
    editor = base.get("editor") if isinstance(base.get("editor"), dict) else {}
    theme = str(editor.get("theme") or "default").strip().lower()
    editor["theme"] = theme if theme in THEME_IDS else "default"
    base["editor"] = editor

    _CACHE = base
    return base


def get_config(override_path: str | Path | None = None) -> dict:
    """Alias for load_config; use for read-only access."""
    return load_config(override_path)


def save_user_config(updates: dict) -> Path:
    """
    Merge updates into the user config.yaml and write it back.
    Raises ConfigDirError or OSError; clears the cache on success.
    """
    path = app_config_dir() / CONFIG_FILE_NAME
    current = _load_yaml(path)
    merged = _deep_merge(current, copy.deepcopy(updates))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(merged, f, default_flow_style=False, sort_keys=True)
    reset_config()
    return path


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None
