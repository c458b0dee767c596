"""Attribute line codec.

Wire form: ``a=<key>[:<value>]\\r\\n``. Prefix and terminator are checked
here and nowhere else; attribute types only ever see ``<key>[:<value>]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

from .exceptions import (
    MalformedLineError,
    MissingPrefixError,
    MissingTerminatorError,
)
from .utils import has_line_break, logger

ATTRIBUTE_KEY = "a="
END_LINE = "\r\n"

# key -> type with an ``unmarshal(text)`` classmethod
ATTRIBUTE_TYPES: Dict[str, type] = {}


def register_attribute(key: str) -> Callable[[type], type]:
    """Class decorator routing ``key`` through :func:`parse_attribute_line`."""
    def deco(cls: type) -> type:
        ATTRIBUTE_TYPES[key] = cls
        return cls
    return deco


def split_attribute(text: str) -> Tuple[str, Optional[str]]:
    """Split ``key[:value]`` on the first colon.

    A bare key yields ``None``; ``key:`` yields an empty value.
    """
    if has_line_break(text):
        raise MalformedLineError(f"Line break inside attribute: {text!r}")
    key, sep, value = text.partition(":")
    if not key:
        raise MalformedLineError(f"Empty attribute key: {text!r}")
    return key, (value if sep else None)


def join_attribute(key: str, value: Optional[str] = None) -> str:
    return key if value is None else f"{key}:{value}"


def unmarshal_line(line: Union[str, bytes]) -> Tuple[str, Optional[str]]:
    """Strip ``a=`` and CRLF from a wire line and split it into key/value."""
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedLineError("Attribute line is not valid UTF-8") from exc
    if not line.startswith(ATTRIBUTE_KEY):
        raise MissingPrefixError(f"Expected {ATTRIBUTE_KEY!r} prefix: {line!r}")
    if not line.endswith(END_LINE):
        raise MissingTerminatorError(f"Expected CRLF terminator: {line!r}")
    body = line[len(ATTRIBUTE_KEY):-len(END_LINE)]
    key, value = split_attribute(body)
    logger.debug("decoded attribute %s", key)
    return key, value


def marshal_line(key: str, value: Optional[str] = None) -> str:
    return f"{ATTRIBUTE_KEY}{join_attribute(key, value)}{END_LINE}"


@dataclass(frozen=True)
class Attribute:
    """Generic ``property`` or ``property:value`` attribute."""

    key: str
    value: Optional[str] = None

    @property
    def is_flag(self) -> bool:
        return self.value is None

    @classmethod
    def parse(cls, text: str) -> "Attribute":
        return cls(*split_attribute(text))

    @classmethod
    def from_line(cls, line: Union[str, bytes]) -> "Attribute":
        return cls(*unmarshal_line(line))

    def to_line(self) -> str:
        return marshal_line(self.key, self.value)

    def __str__(self) -> str:
        return join_attribute(self.key, self.value)


def parse_attribute_line(line: Union[str, bytes]):
    """Decode a wire line into its registered type, or a plain Attribute."""
    key, value = unmarshal_line(line)
    kind = ATTRIBUTE_TYPES.get(key)
    if kind is None:
        return Attribute(key, value)
    return kind.unmarshal(join_attribute(key, value))
