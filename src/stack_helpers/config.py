"""Helper configuration — loads .env, then overrides from settings.json."""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

# Find the project root (where .env lives)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# Runtime settings file for persisted overrides
_SETTINGS_FILE = _PROJECT_ROOT / "data" / "settings.json"


def _load_settings() -> dict:
    """Load saved runtime settings from JSON file."""
    if _SETTINGS_FILE.exists():
        try:
            return json.loads(_SETTINGS_FILE.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            pass
    return {}


def _save_settings(settings: dict):
    """Persist runtime settings to JSON file."""
    _SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
    _SETTINGS_FILE.write_text(
        json.dumps(settings, indent=2), encoding="utf-8"
    )


# Load saved settings once at import time
_runtime = _load_settings()


class Config:
    """Central configuration: .env defaults, settings.json overrides."""

    # Number display (settings.json overrides .env)
    NUMBER_GROUPING: str = _runtime.get(
        "number_grouping",
        os.getenv("NUMBER_GROUPING", "default"),
    )
    NUMBER_LOCALE: str = _runtime.get(
        "number_locale",
        os.getenv("NUMBER_LOCALE", ""),
    )
    MAX_FRACTION_DIGITS: int = int(_runtime.get(
        "max_fraction_digits",
        os.getenv("MAX_FRACTION_DIGITS", "3"),
    ))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def update_number_settings(cls, grouping: str, locale_name: str,
                               max_fraction_digits: int):
        """Update number display settings at runtime and persist to disk."""
        cls.NUMBER_GROUPING = grouping
        cls.NUMBER_LOCALE = locale_name
        cls.MAX_FRACTION_DIGITS = max_fraction_digits

        settings = _load_settings()
        settings["number_grouping"] = grouping
        settings["number_locale"] = locale_name
        settings["max_fraction_digits"] = max_fraction_digits
        _save_settings(settings)

    @classmethod
    def get_grouper(cls):
        """Build the digit-grouping strategy selected by the settings.

        Raises ``ValueError`` if NUMBER_GROUPING names an unknown strategy.
        """
        from stack_helpers.utils.grouping import get_grouper
        return get_grouper(
            cls.NUMBER_GROUPING,
            locale_name=cls.NUMBER_LOCALE or None,
            max_fraction_digits=cls.MAX_FRACTION_DIGITS,
        )
