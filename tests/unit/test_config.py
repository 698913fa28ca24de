"""Tests for settings.json management.

Uses isolated directories via tmp_path and CALPAY_CONFIG_PATH.
"""

import json

import pytest

from calpay.sdk.config import (
    SettingsError,
    get_config_dir,
    get_setting,
    load_settings,
    set_setting,
    unset_setting,
)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CALPAY_CONFIG_PATH", str(config_dir))
    return config_dir


class TestConfigDir:

    def test_env_var_wins(self, isolated_config):
        assert get_config_dir() == isolated_config

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CALPAY_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "calpay"


class TestSettings:

    def test_missing_file_loads_empty(self, isolated_config):
        assert load_settings() == {}

    def test_defaults(self, isolated_config):
        assert get_setting("output_format") == "table"
        assert get_setting("date_format") == "%Y-%m-%d"
        assert get_setting("nope", "fallback") == "fallback"

    def test_set_and_get(self, isolated_config):
        path = set_setting("output_format", "json")
        assert path == isolated_config / "settings.json"
        assert json.loads(path.read_text()) == {"output_format": "json"}
        assert get_setting("output_format") == "json"

    def test_unknown_key_rejected(self, isolated_config):
        with pytest.raises(SettingsError, match="Unknown setting"):
            set_setting("data_dir", "/tmp")

    def test_invalid_output_format_rejected(self, isolated_config):
        with pytest.raises(SettingsError, match="output_format"):
            set_setting("output_format", "csv")

    def test_invalid_date_format_rejected(self, isolated_config):
        with pytest.raises(SettingsError, match="date_format"):
            set_setting("date_format", "YYYY")

    def test_unset(self, isolated_config):
        set_setting("output_format", "yaml")
        assert unset_setting("output_format") is True
        assert get_setting("output_format") == "table"
        assert unset_setting("output_format") is False
