"""Configuration management for Career Pay.

Configuration is a single settings.json holding calculator defaults:

- tax_year: which tax_rules/<year>.yaml to use when none is given
- state: default two-letter state code
- hours_per_week: default hours for hourly pay
- filing_status: default federal filing status

Config directory resolution:
1. CAREER_PAY_CONFIG_PATH environment variable (if set)
2. ~/.config/career-pay/ (XDG_CONFIG_HOME fallback)
"""

import json
import os
from pathlib import Path
from typing import Any

from .errors import ConfigError, InvalidInputError, SettingsValidationError


APP_NAME = "career-pay"
SETTINGS_FILENAME = "settings.json"

DEFAULT_TAX_YEAR = 2024
DEFAULT_STATE = "TX"
DEFAULT_HOURS_PER_WEEK = 40
DEFAULT_FILING_STATUS = "single"

KNOWN_SETTINGS = ("tax_year", "state", "hours_per_week", "filing_status")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. CAREER_PAY_CONFIG_PATH environment variable
    2. ~/.config/career-pay/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("CAREER_PAY_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file exists but is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, "r") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {settings_file}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"{settings_file} must contain a JSON object")

    return settings


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "tax_year", "state")
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def validate_setting(key: str, value: Any) -> Any:
    """Validate and coerce a setting value.

    CLI input arrives as strings, so numeric settings are converted here.

    Returns:
        The coerced value to store

    Raises:
        SettingsValidationError: If the key is unknown or the value invalid
    """
    # Deferred: taxes.rules reads the default year from this module
    from .taxes.rules import get_available_years, normalize_filing_status, normalize_state_code

    if key not in KNOWN_SETTINGS:
        raise SettingsValidationError(
            f"Unknown setting '{key}'. Valid settings: {', '.join(KNOWN_SETTINGS)}"
        )

    if key == "tax_year":
        try:
            year = int(value)
        except (TypeError, ValueError):
            raise SettingsValidationError(f"tax_year must be a year, got '{value}'")
        available = get_available_years()
        if year not in available:
            raise SettingsValidationError(
                f"No tax rules for {year}. Available years: {', '.join(str(y) for y in available)}"
            )
        return year

    if key == "hours_per_week":
        try:
            hours = float(value)
        except (TypeError, ValueError):
            raise SettingsValidationError(f"hours_per_week must be a number, got '{value}'")
        if not 0 < hours <= 80:
            raise SettingsValidationError("hours_per_week must be greater than 0 and at most 80")
        return int(hours) if hours.is_integer() else hours

    try:
        if key == "state":
            return normalize_state_code(value)
        return normalize_filing_status(value)
    except InvalidInputError as e:
        raise SettingsValidationError(str(e)) from e


def set_setting(key: str, value: Any) -> Path:
    """Validate and set a setting value in settings.json.

    Args:
        key: Setting key
        value: Value to set

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = validate_setting(key, value)
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def _get_checked_setting(key: str, default: Any) -> Any:
    """Read a setting, validating values hand-edited into settings.json.

    Raises:
        ConfigError: If the stored value is invalid
    """
    value = get_setting(key)
    if value is None:
        return default
    try:
        return validate_setting(key, value)
    except SettingsValidationError as e:
        raise ConfigError(f"Invalid {key} in {get_settings_path()}: {e}") from e


def get_default_tax_year() -> int:
    """Tax year used when a calculation does not name one."""
    return _get_checked_setting("tax_year", DEFAULT_TAX_YEAR)


def get_default_state() -> str:
    return _get_checked_setting("state", DEFAULT_STATE)


def get_default_hours_per_week() -> float:
    return _get_checked_setting("hours_per_week", DEFAULT_HOURS_PER_WEEK)


def get_default_filing_status() -> str:
    return _get_checked_setting("filing_status", DEFAULT_FILING_STATUS)
