from __future__ import annotations

import importlib
import logging
from functools import lru_cache
from types import ModuleType

from dotenv import load_dotenv

from ..config import get_settings_module

from .constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def load_settings() -> ModuleType:
    """Import the settings module selected by APP_ENV.

    A .env file is read first so its values reach the settings module.
    """
    load_dotenv(override=False)
    settings_module = get_settings_module()
    logger.debug("Loading settings from %s", settings_module)
    return importlib.import_module(settings_module)


def default_locale() -> str:
    settings = load_settings()
    return str(getattr(settings, "DEFAULT_LOCALE", None) or DEFAULT_LOCALE)
