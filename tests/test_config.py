"""Tests for Config class — settings persistence and retrieval."""

import json

import pytest

from stack_helpers.config import Config, _load_settings, _save_settings
from stack_helpers.utils.grouping import DefaultGrouper, LocaleGrouper


class TestConfigDefaults:
    """Verify default configuration values."""

    def test_number_grouping_default(self):
        assert Config.NUMBER_GROUPING == "default"

    def test_max_fraction_digits_is_int(self):
        assert isinstance(Config.MAX_FRACTION_DIGITS, int)

    def test_log_level_is_str(self):
        assert isinstance(Config.LOG_LEVEL, str)


class TestConfigNumberSettings:
    """Test number display settings update and persistence."""

    def test_update_number_settings(self, settings_file):
        Config.update_number_settings(
            grouping="locale", locale_name="C", max_fraction_digits=2,
        )
        assert Config.NUMBER_GROUPING == "locale"
        assert Config.NUMBER_LOCALE == "C"
        assert Config.MAX_FRACTION_DIGITS == 2

        data = json.loads(settings_file.read_text(encoding="utf-8"))
        assert data["number_grouping"] == "locale"
        assert data["number_locale"] == "C"
        assert data["max_fraction_digits"] == 2

    def test_update_keeps_unrelated_settings(self, settings_file):
        _save_settings({"other": "value"})
        Config.update_number_settings("default", "", 3)
        data = json.loads(settings_file.read_text(encoding="utf-8"))
        assert data["other"] == "value"


class TestConfigGrouper:
    """Test building the configured grouping strategy."""

    def test_default_grouper(self):
        grouper = Config.get_grouper()
        assert isinstance(grouper, DefaultGrouper)
        assert grouper.max_fraction_digits == 3

    def test_locale_grouper_with_name(self):
        Config.NUMBER_GROUPING = "locale"
        Config.NUMBER_LOCALE = "C"
        grouper = Config.get_grouper()
        assert isinstance(grouper, LocaleGrouper)
        assert grouper.name == "C"

    def test_empty_locale_means_process_locale(self):
        Config.NUMBER_GROUPING = "locale"
        Config.NUMBER_LOCALE = ""
        assert Config.get_grouper().name is None

    def test_fraction_digits_passed_through(self):
        Config.MAX_FRACTION_DIGITS = 1
        assert Config.get_grouper().max_fraction_digits == 1

    def test_unknown_grouping_raises(self):
        Config.NUMBER_GROUPING = "roman"
        with pytest.raises(ValueError, match="roman"):
            Config.get_grouper()


class TestSettingsFileIO:
    """Test settings file loading and saving."""

    def test_load_nonexistent_returns_empty(self, settings_file):
        assert not settings_file.exists()
        data = _load_settings()
        assert data == {}

    def test_save_and_load_roundtrip(self, settings_file):
        _save_settings({"foo": "bar", "num": 42})
        assert settings_file.exists()
        data = _load_settings()
        assert data["foo"] == "bar"
        assert data["num"] == 42

    def test_corrupt_json_returns_empty(self, settings_file):
        settings_file.write_text("NOT JSON {{{", encoding="utf-8")
        data = _load_settings()
        assert data == {}
