"""Configuration management for calpay.

Machine-specific preferences live in settings.json:
   - output_format: default CLI output (table, json, yaml)
   - date_format: strftime pattern for dates in table output

Config directory resolution:
1. CALPAY_CONFIG_PATH environment variable (if set)
2. XDG_CONFIG_HOME/calpay/ or ~/.config/calpay/
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "calpay"
SETTINGS_FILENAME = "settings.json"

OUTPUT_FORMATS = ("table", "json", "yaml")

DEFAULT_SETTINGS = {
    "output_format": "table",
    "date_format": "%Y-%m-%d",
}


class SettingsError(Exception):
    """Raised when a setting key or value is invalid."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. CALPAY_CONFIG_PATH environment variable
    2. ~/.config/calpay/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("CALPAY_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def validate_setting(key: str, value: Any) -> None:
    """Raise SettingsError if key is unknown or value is invalid for it."""
    if key not in DEFAULT_SETTINGS:
        raise SettingsError(
            f"Unknown setting '{key}'. Valid settings: {', '.join(sorted(DEFAULT_SETTINGS))}"
        )

    if key == "output_format" and value not in OUTPUT_FORMATS:
        raise SettingsError(
            f"Invalid output_format '{value}'. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )

    if key == "date_format":
        if not isinstance(value, str) or "%" not in value:
            raise SettingsError(f"Invalid date_format '{value}'. Expected a strftime pattern like %Y-%m-%d")


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value, falling back to the built-in default.

    Args:
        key: Setting key (e.g., "output_format")
        default: Value returned when neither settings.json nor the
            built-in defaults define the key
    """
    settings = load_settings()
    if key in settings:
        return settings[key]
    return DEFAULT_SETTINGS.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Validate and store a setting value in settings.json.

    Returns:
        Path to the saved settings file

    Raises:
        SettingsError: If the key or value is invalid
    """
    validate_setting(key, value)
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting, reverting it to its default.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
