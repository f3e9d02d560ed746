"""Shared test fixtures."""

import pytest

from stack_helpers.config import Config


@pytest.fixture
def settings_file(tmp_path):
    """Temporary settings file for isolation."""
    return tmp_path / "settings.json"


@pytest.fixture(autouse=True)
def isolate_config(settings_file, monkeypatch):
    """Redirect settings I/O to temp file and pin number display defaults."""
    import stack_helpers.config as config_mod
    monkeypatch.setattr(config_mod, "_SETTINGS_FILE", settings_file)

    saved = {
        "NUMBER_GROUPING": Config.NUMBER_GROUPING,
        "NUMBER_LOCALE": Config.NUMBER_LOCALE,
        "MAX_FRACTION_DIGITS": Config.MAX_FRACTION_DIGITS,
    }
    Config.NUMBER_GROUPING = "default"
    Config.NUMBER_LOCALE = ""
    Config.MAX_FRACTION_DIGITS = 3
    yield
    for attr, val in saved.items():
        setattr(Config, attr, val)
