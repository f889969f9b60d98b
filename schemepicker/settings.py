"""Persistent JSON settings for schemepicker.

Stores the default list height, explicit Alacritty file locations, and an
optional log file. All access is defensive: malformed or missing settings
fall back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "schemepicker"
SETTINGS_FILENAME = "config.json"
SETTINGS_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / SETTINGS_FILENAME
DEFAULT_HEIGHT = 5


def load_settings() -> dict[str, object]:
    """Load the persisted JSON settings object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_height() -> int:
    """Return the configured list height.

    Booleans, non-integers, and values below 1 fall back to ``DEFAULT_HEIGHT``.
    """
    value = load_settings().get("height")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_HEIGHT
    return value


def _load_path(key: str) -> Path | None:
    value = load_settings().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return Path(stripped).expanduser() if stripped else None


def load_alacritty_config_path() -> Path | None:
    """Load an explicit ``alacritty.yml`` location, bypassing discovery."""
    return _load_path("alacritty_config")


def load_color_schemes_path() -> Path | None:
    """Load an explicit ``alacritty_color_schemes.yml`` location."""
    return _load_path("color_schemes")


def load_log_file() -> Path | None:
    return _load_path("log_file")
