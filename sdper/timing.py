"""Timing (``t=``), repeat times (``r=``) and time zones (``z=``).

Times are NTP seconds since 1900. ``r=`` and ``z=`` accept the typed-time
shorthand of RFC 4566 section 5.10 (``d``, ``h``, ``m``, ``s`` suffixes)
on input; output is always plain seconds.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Tuple

from .exceptions import InvalidNumberError, NumberErrorReason, SDPParseError
from .utils import BoundedInt

# Seconds between 1900-01-01 and 1970-01-01.
NTP_UNIX_OFFSET = 2208988800

TYPED_TIME_UNITS = {"d": 86400, "h": 3600, "m": 60, "s": 1}

_TYPED_TIME_RE = re.compile(r"(-?[0-9]+)([dhms]?)")


class Time(BoundedInt):
    __slots__ = ()

    def to_unix(self) -> int:
        return self - NTP_UNIX_OFFSET

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.to_unix(), tz=timezone.utc)

    @classmethod
    def from_unix(cls, seconds: int) -> "Time":
        return cls(int(seconds) + NTP_UNIX_OFFSET)


class Duration(BoundedInt):
    __slots__ = ()

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self)


class Offset(BoundedInt):
    __slots__ = ()

    MIN = -(2 ** 63)
    MAX = 2 ** 63 - 1

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self)


def parse_typed_time(token: str, kind: type[BoundedInt] = Offset) -> BoundedInt:
    """Parse ``7d``, ``-1h``, ``25`` etc. into ``kind`` seconds."""
    m = _TYPED_TIME_RE.fullmatch(token)
    if m is None:
        raise kind.ERROR(NumberErrorReason.NOT_A_NUMBER, token)
    number, unit = m.groups()
    return kind(int(number) * TYPED_TIME_UNITS.get(unit or "s"))


@dataclass(frozen=True)
class Timing:
    """``t=<start-time> <stop-time>``"""

    start_time: Time
    stop_time: Time

    def __post_init__(self):
        object.__setattr__(self, "start_time", Time(self.start_time))
        object.__setattr__(self, "stop_time", Time(self.stop_time))

    @property
    def is_unbounded(self) -> bool:
        return self.stop_time == 0

    @property
    def is_permanent(self) -> bool:
        return self.start_time == 0 and self.stop_time == 0

    @classmethod
    def parse(cls, text: str) -> "Timing":
        parts = text.split(" ")
        if len(parts) != 2:
            raise SDPParseError(f"Malformed timing: {text!r}")
        try:
            return cls(Time(parts[0]), Time(parts[1]))
        except InvalidNumberError as exc:
            raise SDPParseError(f"Malformed timing: {text!r}") from exc

    def __str__(self) -> str:
        return f"{self.start_time} {self.stop_time}"


@dataclass(frozen=True)
class RepeatTime:
    """``r=<repeat interval> <active duration> <offsets from start-time>``"""

    repeat_interval: Duration
    active_duration: Duration
    offsets: Tuple[Offset, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "repeat_interval", Duration(self.repeat_interval))
        object.__setattr__(self, "active_duration", Duration(self.active_duration))
        object.__setattr__(self, "offsets", tuple(Offset(o) for o in self.offsets))

    @classmethod
    def parse(cls, text: str) -> "RepeatTime":
        parts = text.split()
        if len(parts) < 2:
            raise SDPParseError(f"Malformed repeat time: {text!r}")
        try:
            return cls(
                repeat_interval=parse_typed_time(parts[0], Duration),
                active_duration=parse_typed_time(parts[1], Duration),
                offsets=tuple(parse_typed_time(p, Offset) for p in parts[2:]),
            )
        except InvalidNumberError as exc:
            raise SDPParseError(f"Malformed repeat time: {text!r}") from exc

    def __str__(self) -> str:
        return " ".join(str(v) for v in (self.repeat_interval, self.active_duration, *self.offsets))


@dataclass(frozen=True)
class TimeZone:
    """One ``<adjustment time> <offset>`` pair of a ``z=`` line."""

    adjustment_time: Time
    offset: Offset

    def __post_init__(self):
        object.__setattr__(self, "adjustment_time", Time(self.adjustment_time))
        object.__setattr__(self, "offset", Offset(self.offset))

    def __str__(self) -> str:
        return f"{self.adjustment_time} {self.offset}"


def parse_time_zones(text: str) -> Tuple[TimeZone, ...]:
    """Parse a ``z=`` value into its ordered adjustment rules."""
    parts = text.split()
    if not parts or len(parts) % 2:
        raise SDPParseError(f"Malformed time zones: {text!r}")
    try:
        return tuple(
            TimeZone(Time(parts[i]), parse_typed_time(parts[i + 1], Offset))
            for i in range(0, len(parts), 2)
        )
    except InvalidNumberError as exc:
        raise SDPParseError(f"Malformed time zones: {text!r}") from exc


def format_time_zones(zones) -> str:
    return " ".join(str(z) for z in zones)


@dataclass(frozen=True)
class TimingDescription:
    """A ``t=`` line with the ``r=`` lines that follow it, in order."""

    timing: Timing
    repeat_times: Tuple[RepeatTime, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "repeat_times", tuple(self.repeat_times))

    def lines(self):
        yield f"t={self.timing}"
        for repeat in self.repeat_times:
            yield f"r={repeat}"
