from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, time
from typing import Any, Iterable, Optional

from ..core.exceptions import InvalidArgument
from .tokens import Field

# Pattern letter -> the value it carries
FIELD_KINDS = {
    "G": "era",
    "y": "year",
    "u": "year",
    "M": "month",
    "L": "month",
    "d": "day",
    "D": "day_of_year",
    "E": "weekday",
    "a": "am_pm",
    "H": "hour_of_day",
    "k": "clock_hour_of_day",
    "h": "clock_hour_of_am_pm",
    "K": "hour_of_am_pm",
    "m": "minute",
    "s": "second",
    "S": "fraction",
}

RANGES = {
    "year": (MINYEAR, MAXYEAR),
    "month": (1, 12),
    "day": (1, 31),
    "day_of_year": (1, 366),
    "hour_of_day": (0, 23),
    "clock_hour_of_day": (1, 24),
    "clock_hour_of_am_pm": (1, 12),
    "hour_of_am_pm": (0, 11),
    "minute": (0, 59),
    "second": (0, 59),
}


@dataclass(frozen=True)
class ResolvedValue:
    """Date and time of day that the parsed fields resolve to, where present."""

    date: Optional[date]
    time: Optional[time]


def _collect(values: Iterable[tuple[Field, Any]]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for field, value in values:
        kind = FIELD_KINDS[field.symbol]
        if kind in fields and fields[kind] != value:
            raise InvalidArgument(f"Conflicting values for {kind}: {fields[kind]!r} and {value!r}")
        fields[kind] = value
    for kind, (low, high) in RANGES.items():
        value = fields.get(kind)
        if value is not None and not low <= value <= high:
            raise InvalidArgument(f"Value {value} for {kind} is outside {low}..{high}")
    # Era 0 is BC, which date cannot represent
    if fields.get("era") == 0:
        raise InvalidArgument("Years before the common era are not supported")
    return fields


def _resolve_date(fields: dict[str, Any]) -> Optional[date]:
    year = fields.get("year")
    month = fields.get("month")
    day = fields.get("day")
    day_of_year = fields.get("day_of_year")
    if year is None:
        return None

    try:
        if month is not None and day is not None:
            resolved = date(year, month, day)
            if day_of_year is not None and resolved.timetuple().tm_yday != day_of_year:
                raise InvalidArgument(f"Day of year {day_of_year} does not match {resolved.isoformat()}")
        elif day_of_year is not None:
            resolved = date.fromordinal(date(year, 1, 1).toordinal() + day_of_year - 1)
            if resolved.year != year:
                raise InvalidArgument(f"Day of year {day_of_year} is outside year {year}")
            if month is not None and resolved.month != month:
                raise InvalidArgument(f"Day of year {day_of_year} is not in month {month}")
        else:
            return None
    except ValueError as exc:
        raise InvalidArgument(str(exc)) from exc

    weekday = fields.get("weekday")
    if weekday is not None and resolved.weekday() != weekday:
        raise InvalidArgument(f"{resolved.isoformat()} does not fall on the parsed weekday")
    return resolved


def _resolve_hour(fields: dict[str, Any]) -> Optional[int]:
    hour = fields.get("hour_of_day")
    clock_hour = fields.get("clock_hour_of_day")
    if clock_hour is not None:
        clock_hour %= 24
        if hour is not None and hour != clock_hour:
            raise InvalidArgument(f"Conflicting values for hour: {hour} and {clock_hour}")
        hour = clock_hour

    am_pm = fields.get("am_pm")
    half_day_hour = fields.get("hour_of_am_pm")
    clock_half_day_hour = fields.get("clock_hour_of_am_pm")
    if clock_half_day_hour is not None:
        clock_half_day_hour %= 12
        if half_day_hour is not None and half_day_hour != clock_half_day_hour:
            raise InvalidArgument(f"Conflicting values for hour: {half_day_hour} and {clock_half_day_hour}")
        half_day_hour = clock_half_day_hour

    if am_pm is None:
        return hour
    if half_day_hour is not None:
        half_day = half_day_hour + (12 if am_pm == "pm" else 0)
        if hour is not None and hour != half_day:
            raise InvalidArgument(f"Conflicting values for hour: {hour} and {half_day}")
        return half_day
    if hour is not None and (hour >= 12) != (am_pm == "pm"):
        raise InvalidArgument(f"Hour {hour} does not match the {am_pm} marker")
    return hour


def _resolve_time(fields: dict[str, Any]) -> Optional[time]:
    hour = _resolve_hour(fields)
    if hour is None:
        return None
    return time(hour, fields.get("minute", 0), fields.get("second", 0), fields.get("fraction", 0))


def resolve(values: Iterable[tuple[Field, Any]]) -> ResolvedValue:
    """Combine parsed field values into a date and a time of day.

    Either part is None when the fields needed to build it are missing.
    Out-of-range and contradictory fields raise InvalidArgument.
    """
    fields = _collect(values)
    return ResolvedValue(date=_resolve_date(fields), time=_resolve_time(fields))
