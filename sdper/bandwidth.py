"""Bandwidth field (``b=<bwtype>:<bandwidth>``).

Values are kilobits per second unless a custom bwtype says otherwise;
the unit is never interpreted here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Dict

from .exceptions import (
    BandwidthTypeErrorReason,
    InvalidBandwidthTypeError,
    SDPParseError,
    SDPValidationError,
)
from .utils import BoundedInt

_BWTYPE_RE = re.compile(r"(X-)?[A-Za-z0-9]+")


class BandwidthType(str):
    """Alphanumeric bwtype token, optionally ``X-`` prefixed."""

    __slots__ = ()

    def __new__(cls, value: str):
        if not isinstance(value, str) or value == "":
            raise InvalidBandwidthTypeError(BandwidthTypeErrorReason.EMPTY, value)
        if not _BWTYPE_RE.fullmatch(value):
            raise InvalidBandwidthTypeError(BandwidthTypeErrorReason.INVALID_CHARACTERS, value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"BandwidthType({str(self)!r})"


class BandwidthValue(BoundedInt):
    __slots__ = ()

    MAX = 2 ** 32 - 1


@dataclass(frozen=True)
class Bandwidth:
    """Base of the bandwidth variants; see :func:`parse_bandwidth`."""

    value: BandwidthValue

    bwtype: ClassVar[str] = ""

    def __post_init__(self):
        object.__setattr__(self, "value", BandwidthValue(self.value))

    def __str__(self) -> str:
        return f"{self.bwtype}:{self.value}"


@dataclass(frozen=True)
class ApplicationSpecific(Bandwidth):
    """``AS``: the application's maximum bandwidth for one media at one site."""

    bwtype: ClassVar[str] = "AS"


@dataclass(frozen=True)
class ConferenceTotal(Bandwidth):
    """``CT``: upper limit for all media at all sites."""

    bwtype: ClassVar[str] = "CT"


@dataclass(frozen=True)
class TransportIndependentAppSpecific(Bandwidth):
    """``TIAS`` (RFC 3890): maximum bandwidth excluding transport overhead."""

    bwtype: ClassVar[str] = "TIAS"


@dataclass(frozen=True)
class CustomBandwidth:
    type: BandwidthType
    value: BandwidthValue

    def __post_init__(self):
        object.__setattr__(self, "type", BandwidthType(self.type))
        if self.type in KNOWN_BANDWIDTHS:
            raise InvalidBandwidthTypeError(BandwidthTypeErrorReason.RESERVED, self.type)
        object.__setattr__(self, "value", BandwidthValue(self.value))

    @property
    def bwtype(self) -> str:
        return self.type

    def __str__(self) -> str:
        return f"{self.type}:{self.value}"


KNOWN_BANDWIDTHS: Dict[str, type[Bandwidth]] = {
    cls.bwtype: cls for cls in (ApplicationSpecific, ConferenceTotal, TransportIndependentAppSpecific)
}


def parse_bandwidth(text: str):
    """Parse ``AS:128``-style text into the matching variant.

    Unknown bwtypes become :class:`CustomBandwidth` once the token passes
    :class:`BandwidthType` validation.
    """
    bwtype, sep, value = text.partition(":")
    if not sep:
        raise SDPParseError(f"Malformed bandwidth: {text!r}")
    known = KNOWN_BANDWIDTHS.get(bwtype)
    try:
        if known is not None:
            return known(BandwidthValue(value))
        return CustomBandwidth(BandwidthType(bwtype), BandwidthValue(value))
    except SDPValidationError as exc:
        raise SDPParseError(f"Malformed bandwidth: {text!r}") from exc
