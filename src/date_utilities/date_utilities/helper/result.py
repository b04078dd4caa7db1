from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

from ..core.exceptions import InvalidArgument

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a ``try_*`` operation: either a value or the InvalidArgument that stopped it."""

    value: Optional[T] = None
    error: Optional[InvalidArgument] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: InvalidArgument) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]


def returns_result(func: Callable[..., T]) -> Callable[..., Result[T]]:
    """Wrap an operation so InvalidArgument comes back as a failed Result."""

    @wraps(func)
    def decorated_function(*args, **kwargs) -> Result[T]:
        try:
            return Result.success(func(*args, **kwargs))
        except InvalidArgument as exc:
            return Result.failure(exc)

    decorated_function.__name__ = f"try_{func.__name__}"
    return decorated_function
