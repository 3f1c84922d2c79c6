"""Persistent JSON settings.

Stores the feed advance chance, the initial viewport height, the UI theme, and
the log level. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .feed import DEFAULT_ADVANCE_CHANCE
from .state import DEFAULT_VIEW_HEIGHT, clamp_view_height
from .ui_theme import normalize_theme_name

APP_NAME = "moyu"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ReaderSettings:
    feed_advance_chance: float = DEFAULT_ADVANCE_CHANCE
    view_height: int = DEFAULT_VIEW_HEIGHT
    theme: str = "default"
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_chance(value: object) -> float:
    """Accept numbers in ``[0, 1]``; anything else means the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_ADVANCE_CHANCE
    if not 0.0 <= value <= 1.0:
        return DEFAULT_ADVANCE_CHANCE
    return float(value)


def _load_view_height(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_VIEW_HEIGHT
    return clamp_view_height(value)


def _load_log_level(value: object) -> str:
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    if isinstance(logging.getLevelName(candidate), int):
        return candidate
    return DEFAULT_LOG_LEVEL


def load_settings() -> ReaderSettings:
    """Return settings from the config file with every field validated."""
    data = load_config()
    theme = data.get("theme")
    return ReaderSettings(
        feed_advance_chance=_load_chance(data.get("feed_advance_chance")),
        view_height=_load_view_height(data.get("view_height")),
        theme=normalize_theme_name(theme if isinstance(theme, str) else None),
        log_level=_load_log_level(data.get("log_level")),
    )
