import pytest

from src.date_utilities.date_utilities.core.settings import load_settings


@pytest.fixture(autouse=True)
def _testing_settings(monkeypatch: pytest.MonkeyPatch):
    """Pin the settings module so the default locale is the same on every machine."""
    monkeypatch.setenv("APP_ENV", "testing")
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
