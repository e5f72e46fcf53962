"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from vendingmachine.config.settings import Settings, get_settings
from vendingmachine.core.exceptions import ConfigurationError


def test_defaults():
    settings = Settings()

    assert settings.db_path == Path("machine-db.db")
    assert settings.skip_existing_seed_rows is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("VENDING_DB_PATH", str(tmp_path / "custom.db"))
    monkeypatch.setenv("VENDING_SKIP_EXISTING_SEED_ROWS", "true")
    monkeypatch.setenv("VENDING_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.db_path == tmp_path / "custom.db"
    assert settings.skip_existing_seed_rows is True
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("VENDING_DB_PATH=from-dotenv.db\n")

    assert Settings().db_path == Path("from-dotenv.db")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_invalid_log_level_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("VENDING_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        get_settings()
