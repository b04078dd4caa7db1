from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from babel.dates import format_datetime, get_time_format

from ..common.datetime_utils import load_locale, whole_minutes
from ..common.validators import require_local_datetime, require_non_empty, require_present
from ..core.exceptions import InvalidArgument
from ..core.settings import default_locale
from ..patterns.parser import compile_pattern
from ..patterns.resolver import ResolvedValue, resolve
from ..patterns.tokens import validate_format_pattern, without_zone_fields
from .result import returns_result


@dataclass(frozen=True)
class DateTimeHelper:
    """Formatting, parsing and minute arithmetic for local (zone-less) date/time values.

    Holds no state beyond its locale, so one instance can be shared freely.
    Every failure is raised as InvalidArgument; the ``try_*`` variants return
    a Result instead.
    """

    locale: str = field(default_factory=default_locale)

    def format_with_pattern(self, date_time: datetime, pattern: str) -> str:
        """Render ``date_time`` with a CLDR pattern such as ``yyyy-MM-dd HH:mm``."""
        value = require_local_datetime(date_time, "date_time")
        require_present(pattern, "pattern")
        if not isinstance(pattern, str):
            raise InvalidArgument(f"pattern must be a string, got {type(pattern).__name__}")
        validate_format_pattern(pattern)
        return self._format(value, pattern, self.locale)

    def format_full_localized(self, date_time: datetime, locale: Optional[str] = None) -> str:
        """Render the time of day in the locale's "full" time style.

        ``locale`` overrides the helper's locale for this call. Zone fields of
        the locale's full style are left out.
        """
        value = require_local_datetime(date_time, "date_time")
        locale = locale or self.locale
        full_pattern = get_time_format("full", locale=load_locale(locale)).pattern
        return self._format(value, without_zone_fields(full_pattern), locale)

    def parse_date(self, date_string: str, pattern: str) -> date:
        resolved = self._parse(date_string, pattern)
        if resolved.date is None:
            raise InvalidArgument(f"Pattern {pattern!r} does not describe a full date")
        return resolved.date

    def parse_date_time(self, date_string: str, pattern: str) -> datetime:
        resolved = self._parse(date_string, pattern)
        if resolved.date is None or resolved.time is None:
            raise InvalidArgument(f"Pattern {pattern!r} does not describe a full date and time")
        return datetime.combine(resolved.date, resolved.time)

    def minutes_between(self, start: datetime, end: datetime) -> int:
        """Signed whole minutes from ``start`` to ``end``, truncated toward zero."""
        start_value = require_local_datetime(start, "start")
        end_value = require_local_datetime(end, "end")
        return whole_minutes(end_value - start_value)

    try_format_with_pattern = returns_result(format_with_pattern)
    try_format_full_localized = returns_result(format_full_localized)
    try_parse_date = returns_result(parse_date)
    try_parse_date_time = returns_result(parse_date_time)
    try_minutes_between = returns_result(minutes_between)

    @staticmethod
    def _format(value: datetime, pattern: str, locale: str) -> str:
        try:
            return format_datetime(value, pattern, locale=load_locale(locale))
        except (KeyError, ValueError) as exc:
            raise InvalidArgument(f"Cannot format with pattern {pattern!r}: {exc}") from exc

    def _parse(self, date_string: str, pattern: str) -> ResolvedValue:
        text = require_non_empty(date_string, "date_string")
        pattern = require_non_empty(pattern, "pattern")
        return resolve(compile_pattern(pattern, self.locale).parse(text))
