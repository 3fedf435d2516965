"""Tests for settings.json handling."""

import json

import pytest

from careerpay.sdk import (
    get_config_dir,
    get_default_filing_status,
    get_default_hours_per_week,
    get_default_state,
    get_default_tax_year,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
    validate_setting,
)
from careerpay.sdk.errors import ConfigError, SettingsValidationError


def test_config_dir_from_env(isolated_config):
    assert get_config_dir() == isolated_config
    assert get_settings_path() == isolated_config / "settings.json"


def test_config_dir_xdg_fallback(tmp_path, monkeypatch):
    monkeypatch.delenv("CAREER_PAY_CONFIG_PATH")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_config_dir() == tmp_path / "career-pay"


def test_defaults_without_settings_file():
    assert load_settings() == {}
    assert get_default_tax_year() == 2024
    assert get_default_state() == "TX"
    assert get_default_hours_per_week() == 40
    assert get_default_filing_status() == "single"


def test_set_and_read_back():
    path = set_setting("state", "ca")
    set_setting("hours_per_week", "37.5")
    set_setting("tax_year", "2026")
    set_setting("filing_status", "married filing jointly")

    assert json.loads(path.read_text()) == {
        "state": "CA",
        "hours_per_week": 37.5,
        "tax_year": 2026,
        "filing_status": "mfj",
    }
    assert get_default_state() == "CA"
    assert get_default_tax_year() == 2026


def test_whole_hours_stored_as_int():
    set_setting("hours_per_week", "40")
    assert load_settings()["hours_per_week"] == 40
    assert isinstance(load_settings()["hours_per_week"], int)


def test_unset():
    set_setting("state", "NY")
    assert unset_setting("state") is True
    assert unset_setting("state") is False
    assert get_default_state() == "TX"


@pytest.mark.parametrize("key,value", [
    ("tax_year", "1999"),
    ("tax_year", "soon"),
    ("hours_per_week", "0"),
    ("hours_per_week", "81"),
    ("hours_per_week", "lots"),
    ("state", "Texas"),
    ("filing_status", "widow"),
    ("currency", "USD"),
])
def test_invalid_values_rejected(key, value):
    with pytest.raises(SettingsValidationError):
        validate_setting(key, value)


def test_rejected_value_not_saved():
    with pytest.raises(SettingsValidationError):
        set_setting("state", "Texas")
    assert not get_settings_path().exists()


def test_invalid_json_raises_config_error(isolated_config):
    (isolated_config / "settings.json").write_text("{not json")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings()


def test_non_object_json_raises_config_error(isolated_config):
    (isolated_config / "settings.json").write_text("[1, 2]")
    with pytest.raises(ConfigError, match="JSON object"):
        load_settings()


@pytest.mark.parametrize("key,value,reader", [
    ("tax_year", "soon", get_default_tax_year),
    ("tax_year", 1999, get_default_tax_year),
    ("hours_per_week", 500, get_default_hours_per_week),
    ("state", "Texas", get_default_state),
    ("filing_status", "widow", get_default_filing_status),
])
def test_hand_edited_bad_value_raises_config_error(isolated_config, key, value, reader):
    (isolated_config / "settings.json").write_text(json.dumps({key: value}))
    with pytest.raises(ConfigError, match=f"Invalid {key}"):
        reader()


def test_hand_edited_values_are_coerced(isolated_config):
    (isolated_config / "settings.json").write_text(json.dumps({"tax_year": "2026", "state": "ny"}))
    assert get_default_tax_year() == 2026
    assert get_default_state() == "NY"
