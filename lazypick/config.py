"""Persistent JSON config helpers.

Stores the preferred UI theme and a default prompt string.
Malformed or missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazypick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    return value if isinstance(value, str) else None


def load_theme_name() -> str | None:
    """Return the configured UI theme name, if any."""
    return _load_string("theme")


def load_default_prompt() -> str:
    """Return the configured prompt used when ``--prompt`` is not given."""
    return _load_string("prompt") or ""
