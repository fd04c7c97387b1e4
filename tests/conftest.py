import logging

import pytest

from backend.database.config.config import Settings, get_settings, load_settings

BASE_URL = "http://localhost:8888/shop/"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables and cached settings out of the tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture
def make_settings(tmp_path):
    """Factory for sqlite-backed settings with optional overrides."""

    def _make(**overrides):
        values = {
            "_env_file": None,
            "DB_DRIVER_NAME": "sqlite",
            "DB_HOST": "",
            "DB_USERNAME": "",
            "DB_PASSWORD": "",
            "DB_DATABASE_NAME": str(tmp_path / "shop.db"),
            "BASE_URL": BASE_URL,
        }
        values.update(overrides)
        return load_settings(**values)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()
