"""Utility helpers: XDG paths, file I/O, app configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path


APP_NAME = "hyprmon"


def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def config_dir() -> Path:
    """Return ~/.config/hyprmon, creating it if needed."""
    d = _xdg_config_home() / APP_NAME
    d.mkdir(parents=True, exist_ok=True)
    return d


def hyprland_config_dir() -> Path:
    """Return the Hyprland config directory."""
    return _xdg_config_home() / "hypr"


def default_monitors_conf() -> Path:
    """Return the monitors config path, honouring the ``monitors_conf`` setting."""
    configured = load_app_settings().get("monitors_conf")
    if configured:
        return expand_path(configured)
    return hyprland_config_dir() / "monitors.conf"


def expand_path(path: str | os.PathLike) -> Path:
    """Expand a leading ``~`` (and ``~user``) in *path*."""
    return Path(os.path.expanduser(os.fspath(path)))


def read_json(path: Path) -> dict | list | None:
    """Read and parse a JSON file, returning None on failure."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None


def write_json(path: Path, data: dict | list) -> None:
    """Write data as formatted JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def read_text(path: Path) -> str | None:
    """Read a UTF-8 text file, returning None if it is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def write_text(path: Path, text: str) -> None:
    """Write text to a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def backup_file(path: Path) -> Path | None:
    """Create a .bak copy of a file. Returns backup path or None."""
    if not path.exists():
        return None
    bak = path.with_suffix(path.suffix + ".bak")
    bak.write_bytes(path.read_bytes())
    return bak


def restore_backup(path: Path) -> bool:
    """Restore a file from its .bak copy."""
    bak = path.with_suffix(path.suffix + ".bak")
    if not bak.exists():
        return False
    path.write_bytes(bak.read_bytes())
    bak.unlink()
    return True


def _settings_path() -> Path:
    """Return the path to the global app settings file."""
    return config_dir() / "settings.json"


def load_app_settings() -> dict:
    """Load global application settings."""
    data = read_json(_settings_path())
    return data if isinstance(data, dict) else {}


def save_app_settings(settings: dict) -> None:
    """Save global application settings."""
    write_json(_settings_path(), settings)
