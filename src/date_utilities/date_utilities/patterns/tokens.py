"""Format-pattern tokenizer.

Patterns use the CLDR date-field symbols (``yyyy``, ``MM``, ``dd``, ``HH``,
``mm``, ``ss``...). ASCII letters are fields, a run of one letter is a single
field whose length picks the width. Text in single quotes is literal and
``''`` stands for a quote. The characters ``{ } # [ ]`` are reserved and
rejected, so optional sections are not supported. Everything else is literal text.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Union

from babel.dates import PATTERN_CHARS

from ..core.constants import PATTERN_CACHE_SIZE
from ..core.exceptions import InvalidArgument

# Brackets mark optional sections in some pattern dialects; they are not supported here
RESERVED_CHARS = frozenset("{}#[]")
ZONE_SYMBOLS = frozenset("zZOvVxX")


@dataclass(frozen=True)
class Field:
    """One pattern field: ``symbol`` repeated ``width`` times."""

    symbol: str
    width: int

    @property
    def text(self) -> str:
        return self.symbol * self.width


Token = Union[str, Field]


def _check_field(pattern: str, symbol: str, width: int) -> None:
    if symbol not in PATTERN_CHARS:
        raise InvalidArgument(f"Unknown pattern letter {symbol!r} in {pattern!r}")
    allowed = PATTERN_CHARS[symbol]
    if allowed and width not in allowed:
        raise InvalidArgument(f"Invalid length for field {symbol * width!r} in {pattern!r}")


def _closing_quote(pattern: str, start: int) -> int:
    end = start
    while True:
        end = pattern.find("'", end)
        if end < 0:
            raise InvalidArgument(f"Unterminated quote in pattern {pattern!r}")
        if pattern.startswith("''", end):
            end += 2
            continue
        return end


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def tokenize(pattern: str) -> tuple[Token, ...]:
    tokens: list[Token] = []
    literal: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            if pattern.startswith("''", index):
                literal.append("'")
                index += 2
                continue
            end = _closing_quote(pattern, index + 1)
            literal.append(pattern[index + 1:end].replace("''", "'"))
            index = end + 1
        elif char.isascii() and char.isalpha():
            width = 1
            while index + width < len(pattern) and pattern[index + width] == char:
                width += 1
            _check_field(pattern, char, width)
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(Field(char, width))
            index += width
        elif char in RESERVED_CHARS:
            raise InvalidArgument(f"Reserved character {char!r} in pattern {pattern!r}")
        else:
            literal.append(char)
            index += 1
    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


def validate_format_pattern(pattern: str) -> tuple[Token, ...]:
    """Tokenize a pattern meant for local values.

    Time-zone fields are rejected since local values carry no zone.
    """
    tokens = tokenize(pattern)
    for token in tokens:
        if isinstance(token, Field) and token.symbol in ZONE_SYMBOLS:
            raise InvalidArgument(f"Field {token.text!r} needs a time zone; local values have none")
    return tokens


def join_tokens(tokens: tuple[Token, ...]) -> str:
    parts = []
    for token in tokens:
        if isinstance(token, Field):
            parts.append(token.text)
        elif token:
            parts.append("'" + token.replace("'", "''") + "'")
    return "".join(parts)


def _join_around_zone(left: str, right: str) -> str:
    """Join the literals on either side of a dropped zone field.

    Brackets that wrapped the field go with it; whitespace collapses to one separator.
    """
    left_core, right_core = left.rstrip(), right.lstrip()
    if left_core.endswith(("(", "[")) and right_core.startswith((")", "]")):
        left_core, right_core = left_core[:-1].rstrip(), right_core[1:].lstrip()
    removed = left[len(left_core):] + right[:len(right) - len(right_core)]
    separator = next((char for char in removed if char.isspace()), "")
    return left_core + separator + right_core


def without_zone_fields(pattern: str) -> str:
    """Drop time-zone fields from a locale pattern, tidying the literals they leave."""
    tokens = tokenize(pattern)
    kept: list[Token] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not (isinstance(token, Field) and token.symbol in ZONE_SYMBOLS):
            kept.append(token)
            continue
        left = kept.pop() if kept and isinstance(kept[-1], str) else ""
        right = ""
        if index < len(tokens) and isinstance(tokens[index], str):
            right = tokens[index]
            index += 1
        kept.append(_join_around_zone(left, right))
    if kept and isinstance(kept[0], str):
        kept[0] = kept[0].lstrip()
    if kept and isinstance(kept[-1], str):
        kept[-1] = kept[-1].rstrip()
    return join_tokens(tuple(kept))
