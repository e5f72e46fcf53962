"""Shared fixtures for vendingmachine tests."""

from pathlib import Path

import pytest
import structlog

from vendingmachine.config.settings import Settings, get_settings
from vendingmachine.db.store import MachineStore


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test from an empty directory with no VENDING_ overrides."""
    for name in ("VENDING_DB_PATH", "VENDING_SKIP_EXISTING_SEED_ROWS", "VENDING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def db_path(tmp_path) -> Path:
    """An empty database file, as left by 'init-db'."""
    path = tmp_path / "machine-db.db"
    path.touch()
    return path


@pytest.fixture
def settings(db_path) -> Settings:
    return Settings(db_path=db_path)


@pytest.fixture
def store(settings):
    """An open, unseeded store."""
    with MachineStore(settings=settings) as store:
        yield store


@pytest.fixture
def seeded_store(store):
    store.seed_store()
    return store
