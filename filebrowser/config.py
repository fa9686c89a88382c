"""Persistent JSON config helpers.

Supplies defaults for browser options; command-line flags override them.
All access is defensive: malformed or missing config falls back safely and
values of the wrong type are ignored key by key.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "file-browser"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_BOOL_KEYS = {
    "show_hidden": "show_hidden",
    "show_icons": "show_icons",
    "show_status": "show_status",
    "print_path": "print_path",
    "use_mode_keys": "use_mode_keys",
}
_STR_KEYS = {
    "cmd": "open_command",
    "file_format": "file_format",
    "directory_format": "directory_format",
}
# Decorations may be empty, as on the command line.
_TEXT_KEYS = {
    "hidden_symbol": "hidden_symbol",
    "no_hidden_symbol": "no_hidden_symbol",
    "path_sep": "path_sep",
}


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_themes(value: object) -> tuple[str, ...] | None:
    """Accept a theme name or a list of names; drop blanks and non-strings."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return None
    themes = tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
    return themes or None


def option_overrides_from_config(data: dict[str, object]) -> dict[str, object]:
    """Map config keys onto ``BrowserOptions`` field names, keeping valid values only."""
    overrides: dict[str, object] = {}
    for key, field_name in _BOOL_KEYS.items():
        value = data.get(key)
        if isinstance(value, bool):
            overrides[field_name] = value
    for key, field_name in _STR_KEYS.items():
        value = data.get(key)
        if isinstance(value, str) and value:
            overrides[field_name] = value
    for key, field_name in _TEXT_KEYS.items():
        value = data.get(key)
        if isinstance(value, str):
            overrides[field_name] = value

    start_dir = data.get("dir")
    if isinstance(start_dir, str) and start_dir.strip():
        overrides["start_dir"] = Path(start_dir).expanduser()

    themes = _coerce_themes(data.get("themes"))
    if themes is not None:
        overrides["icon_themes"] = themes

    depth = data.get("depth")
    if isinstance(depth, int) and not isinstance(depth, bool) and depth >= 0:
        overrides["depth_limit"] = depth
    return overrides


def load_option_overrides() -> dict[str, object]:
    """Load config-file option overrides."""
    return option_overrides_from_config(load_config())


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "load_config",
    "option_overrides_from_config",
    "load_option_overrides",
]
