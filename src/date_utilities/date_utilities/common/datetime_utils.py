from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from babel import Locale, UnknownLocaleError

from ..core.constants import MICROSECONDS_PER_MINUTE
from ..core.exceptions import InvalidArgument


def whole_minutes(delta: timedelta) -> int:
    """Whole minutes in ``delta``, truncated toward zero."""
    micros = delta // timedelta(microseconds=1)
    minutes = abs(micros) // MICROSECONDS_PER_MINUTE
    return minutes if micros >= 0 else -minutes


@lru_cache(maxsize=None)
def load_locale(identifier: str) -> Locale:
    if not identifier or not isinstance(identifier, str):
        raise InvalidArgument(f"Locale identifier is empty or invalid: {identifier!r}")
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise InvalidArgument(f"Unknown locale {identifier!r}") from exc
