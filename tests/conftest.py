"""Shared fixtures: keep tests away from the user's real settings.json."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty, per-test config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("CAREER_PAY_CONFIG_PATH", str(config_dir))
    return config_dir
