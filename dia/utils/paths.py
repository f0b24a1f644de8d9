"""Path helpers: user config directory and recent-path normalization."""

import os
import sys
from pathlib import Path

from dia.exceptions import ConfigDirError

APP_DIR_NAME = "dia"
ENV_CONFIG_DIR = "DIA_CONFIG_DIR"


def user_config_dir() -> Path:
    """
    Return the platform user config directory (not the dia subdirectory).
    Windows: %APPDATA%. macOS: ~/Library/Application Support.
    Others: $XDG_CONFIG_HOME (must be absolute) or ~/.config.
    Raises ConfigDirError when the required variables are missing.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise ConfigDirError("%APPDATA% is not defined")
        return Path(appdata)

    if sys.platform == "darwin":
        home = os.environ.get("HOME", "")
        if not home:
            raise ConfigDirError("$HOME is not defined")
        return Path(home) / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        if not os.path.isabs(xdg):
            raise ConfigDirError("path in $XDG_CONFIG_HOME is relative: %s" % xdg)
        return Path(xdg)
    home = os.environ.get("HOME", "")
    if not home:
        raise ConfigDirError("neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def app_config_dir() -> Path:
    """Return <user-config-dir>/dia, or DIA_CONFIG_DIR when set."""
    override = os.environ.get(ENV_CONFIG_DIR, "").strip()
    if override:
        return Path(override).expanduser()
    return user_config_dir() / APP_DIR_NAME


def normalize_path(raw) -> str:
    """
    Clean raw lexically and make it absolute against the working directory.
    Returns "" for the current-directory sentinel (and the empty string);
    falls back to the cleaned path if the working directory cannot be resolved.
    """
    clean = os.path.normpath(os.fspath(raw)) if raw else "."
    if os.sep == "/" and clean.startswith("//"):
        # POSIX normpath keeps exactly two leading slashes
        clean = "/" + clean.lstrip("/")
    if clean == os.curdir:
        return ""
    try:
        return os.path.abspath(clean)
    except OSError:
        return clean


def display_label(path: str) -> str:
    """Menu label for a recent path: 'name (parent)' or just 'name'."""
    name = os.path.basename(path) or path
    parent = os.path.dirname(path)
    if parent and parent != os.curdir:
        return "%s (%s)" % (name, parent)
    return name
