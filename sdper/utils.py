"""Utilities: logging, bounded integers, text validation helpers.

Every integer newtype in the package derives from BoundedInt, so range
checks and decimal parsing live in exactly one place.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from .exceptions import (
    InvalidNumberError,
    InvalidTextError,
    NumberErrorReason,
    TextErrorReason,
)

logger = logging.getLogger("sdper")
logger.addHandler(logging.NullHandler())

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"-?[0-9]+")


class BoundedInt(int):
    """An ``int`` that only exists within ``[MIN, MAX]``.

    Accepts an int or a canonical decimal string (no leading zeros, no
    ``-0``), so every accepted string prints back unchanged. Subclasses
    set MIN/MAX and optionally ERROR to raise a more specific exception.
    """

    __slots__ = ()

    MIN = 0
    MAX = 2 ** 64 - 1
    ERROR: type[InvalidNumberError] = InvalidNumberError

    def __new__(cls, value: Union[int, str]):
        if isinstance(value, bool):
            raise cls.ERROR(NumberErrorReason.NOT_A_NUMBER, value)
        if isinstance(value, str):
            pattern = _SIGNED_RE if cls.MIN < 0 else _UNSIGNED_RE
            if not pattern.fullmatch(value):
                raise cls.ERROR(NumberErrorReason.NOT_A_NUMBER, value)
            number = int(value)
            if str(number) != value:
                raise cls.ERROR(NumberErrorReason.NOT_CANONICAL, value)
        elif isinstance(value, int):
            number = int(value)
        else:
            raise cls.ERROR(NumberErrorReason.NOT_A_NUMBER, value)
        if not cls.MIN <= number <= cls.MAX:
            raise cls.ERROR(NumberErrorReason.OUT_OF_RANGE, value)
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    # int has no __str__ of its own; keep str() and f-strings decimal.
    def __str__(self) -> str:
        return int.__repr__(self)


def has_line_break(value: str) -> bool:
    return "\r" in value or "\n" in value


class Text(str):
    """Non-empty, single-line free text (the ``<text>`` rule of RFC 4566)."""

    __slots__ = ()

    def __new__(cls, value: str):
        if not isinstance(value, str) or value == "":
            raise InvalidTextError(TextErrorReason.EMPTY, value)
        if has_line_break(value):
            raise InvalidTextError(TextErrorReason.HAS_LINE_BREAK, value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"
