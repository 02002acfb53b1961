"""Persistent JSON config helpers.

Reads the preferred directory theme and color mode from a hand-edited JSON
file. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

COLOR_MODES: tuple[str, ...] = ("always", "auto", "never")
DEFAULT_COLOR_MODE = "always"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load configured theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_color_mode() -> str:
    """Return configured color mode; anything unrecognized reads as ``always``."""
    value = load_config().get("color")
    if isinstance(value, str) and value.strip().lower() in COLOR_MODES:
        return value.strip().lower()
    return DEFAULT_COLOR_MODE
