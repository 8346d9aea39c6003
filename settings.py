"""JSON-based settings persistence for the calendar window."""

from __future__ import annotations

import json
import logging
import os

logger = logging.getLogger(__name__)

_ENV_PATH = "CALENDAR_DAY_GRID_SETTINGS"
_DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".calendar-day-grid.json")

_DEFAULTS = {
    "dark_mode": False,
    "first_weekday": 0,
    "show_week_numbers": True,
    "window_width": None,
    "window_height": None,
}


def settings_path() -> str:
    """Return the settings file location, honouring the environment override."""
    return os.environ.get(_ENV_PATH) or _DEFAULT_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or bad keys."""
    path = path or settings_path()
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected an object", path)
        return settings

    for key in ("dark_mode", "show_week_numbers"):
        if key in stored:
            if isinstance(stored[key], bool):
                settings[key] = stored[key]
            else:
                logger.warning("Ignoring setting %s=%r", key, stored[key])
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        # bool is an int subclass; never accept it as a size
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            settings[key] = value
        elif value is not None:
            logger.warning("Ignoring setting %s=%r", key, value)
    if "first_weekday" in stored:
        value = stored["first_weekday"]
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 6:
            settings["first_weekday"] = value
        else:
            logger.warning("Ignoring setting first_weekday=%r", value)
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = path or settings_path()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", path)
