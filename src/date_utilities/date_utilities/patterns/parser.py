from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Optional

from babel import Locale
from babel.dates import get_day_names, get_era_names, get_month_names, get_period_names

from ..common.datetime_utils import load_locale
from ..core.constants import MAX_YEAR_DIGITS, PATTERN_CACHE_SIZE, TWO_DIGIT_YEAR_BASE
from ..core.exceptions import InvalidArgument
from .tokens import Field, tokenize

logger = logging.getLogger(__name__)

NUMERIC_SYMBOLS = frozenset("yuMLdDHkhKmsS")
TEXT_SYMBOLS = frozenset("GMLEa")

# Field length -> CLDR name width for text fields
NAME_WIDTHS = {1: "abbreviated", 2: "abbreviated", 3: "abbreviated", 4: "wide", 5: "narrow", 6: "short"}


def _is_text(field: Field) -> bool:
    if field.symbol in ("M", "L"):
        return field.width >= 3
    return field.symbol in TEXT_SYMBOLS


def _digits(field: Field) -> str:
    # ASCII digits only; \d would also accept other scripts' digits
    width = field.width
    if field.symbol in ("y", "u"):
        return "[0-9]{2}" if width == 2 else "[0-9]{%d,%d}" % (width, max(width, MAX_YEAR_DIGITS))
    if field.symbol == "S":
        return "[0-9]{%d}" % width
    if field.symbol == "D":
        return {1: "[0-9]{1,3}", 2: "[0-9]{2,3}", 3: "[0-9]{3}"}[width]
    return "[0-9]{1,2}" if width == 1 else "[0-9]{2}"


def _names(field: Field, locale: Locale) -> Mapping[Any, str]:
    width = NAME_WIDTHS[field.width]
    if field.symbol == "M":
        return get_month_names(width, context="format", locale=locale)
    if field.symbol == "L":
        return get_month_names(width, context="stand-alone", locale=locale)
    if field.symbol == "E":
        return get_day_names(width, context="format", locale=locale)
    if field.symbol == "a":
        names = get_period_names(width, context="format", locale=locale)
        return {key: names[key] for key in ("am", "pm") if key in names}
    return get_era_names(width, locale=locale)


def _text_lookup(field: Field, locale: Locale) -> dict[str, Any]:
    lookup: dict[str, Any] = {}
    for value, name in _names(field, locale).items():
        # Narrow names repeat (J for January, June, July); the first one wins
        lookup.setdefault(name, value)
    if not lookup:
        raise InvalidArgument(f"Locale {locale} has no names for field {field.text!r}")
    return lookup


@dataclass(frozen=True)
class CompiledPattern:
    """A pattern compiled to a regular expression plus per-field converters."""

    pattern: str
    locale: str
    regex: re.Pattern
    fields: tuple[Field, ...]
    lookups: tuple[Optional[dict[str, Any]], ...]

    def parse(self, text: str) -> list[tuple[Field, Any]]:
        match = self.regex.fullmatch(text)
        if match is None:
            raise InvalidArgument(f"Text {text!r} could not be parsed with pattern {self.pattern!r}")
        return [
            (field, self._convert(field, lookup, match.group(f"f{index}")))
            for index, (field, lookup) in enumerate(zip(self.fields, self.lookups))
        ]

    @staticmethod
    def _convert(field: Field, lookup: Optional[dict[str, Any]], raw: str) -> Any:
        if lookup is not None:
            return lookup[raw]
        if field.symbol == "S":
            # Sub-microsecond digits are truncated
            return int((raw + "000000")[:6])
        if field.symbol in ("y", "u") and field.width == 2:
            return TWO_DIGIT_YEAR_BASE + int(raw)
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidArgument(f"Value for field {field.text!r} is too long") from exc


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str, locale: str) -> CompiledPattern:
    """Compile ``pattern`` for parsing text written in ``locale``.

    Compiled patterns are immutable, so they are cached and shared.
    """
    babel_locale = load_locale(locale)
    parts: list[str] = []
    fields: list[Field] = []
    lookups: list[Optional[dict[str, Any]]] = []
    for token in tokenize(pattern):
        if isinstance(token, str):
            parts.append(re.escape(token))
            continue
        if token.symbol not in NUMERIC_SYMBOLS | TEXT_SYMBOLS:
            raise InvalidArgument(f"Pattern letter {token.symbol!r} is not supported for parsing")
        group = f"f{len(fields)}"
        if _is_text(token):
            lookup = _text_lookup(token, babel_locale)
            names = sorted(lookup, key=len, reverse=True)
            parts.append(f"(?P<{group}>" + "|".join(re.escape(name) for name in names) + ")")
        else:
            lookup = None
            parts.append(f"(?P<{group}>{_digits(token)})")
        fields.append(token)
        lookups.append(lookup)

    logger.debug("Compiled pattern %r for locale %s", pattern, locale)
    return CompiledPattern(
        pattern=pattern,
        locale=locale,
        regex=re.compile("".join(parts)),
        fields=tuple(fields),
        lookups=tuple(lookups),
    )
