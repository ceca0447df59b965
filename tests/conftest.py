import pytest

from flyyer import config

NOW = 1600000000.4


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.delenv("FLYYER_CDN_BASE", raising=False)
    monkeypatch.delenv("FLYYER_LOG_LEVEL", raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def frozen_time(monkeypatch):
    monkeypatch.setattr("flyyer.meta.time.time", lambda: NOW)
    return NOW
