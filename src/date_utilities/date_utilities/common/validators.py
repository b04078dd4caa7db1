from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.exceptions import InvalidArgument


def require_present(value: Any, field_name: str) -> Any:
    if value is None:
        raise InvalidArgument(f"{field_name} is null")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or value == "":
        raise InvalidArgument(f"{field_name} is empty or null")
    if not isinstance(value, str):
        raise InvalidArgument(f"{field_name} must be a string, got {type(value).__name__}")
    return value


def require_local_datetime(value: Any, field_name: str) -> datetime:
    """Accept only naive datetimes; dates without a time and aware values are rejected."""
    require_present(value, field_name)
    if not isinstance(value, datetime):
        raise InvalidArgument(f"{field_name} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        raise InvalidArgument(f"{field_name} must be a local datetime without a time zone")
    return value
