import sys

import pytest

from src.date_utilities.date_utilities import config
from src.date_utilities.date_utilities.config import get_settings_module
from src.date_utilities.date_utilities.core.settings import default_locale, load_settings
from src.date_utilities.date_utilities.helper.service import DateTimeHelper


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "production"),
        ("prod", "production"),
        ("TESTING", "testing"),
        ("development", "development"),
        ("anything-else", "development"),
    ],
)
def test_get_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == f"{config.__name__}.{module}"


def test_settings_modules_live_inside_the_package():
    assert config.__name__.endswith("date_utilities.config")


def test_default_locale_in_testing():
    assert default_locale() == "en_US"
    assert DateTimeHelper().locale == "en_US"


def test_default_locale_read_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DATE_UTILITIES_LOCALE", "fr_FR")
    monkeypatch.delitem(sys.modules, get_settings_module(), raising=False)
    load_settings.cache_clear()

    assert default_locale() == "fr_FR"
