"""Origin field (``o=``).

``o=<username> <sess-id> <sess-version> <nettype> <addrtype> <unicast-address>``

The tuple of all six fields is meant to be globally unique; only the
syntax of each field is checked here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .connection import Address, format_address, parse_full_address
from .exceptions import InvalidUsernameError, SDPParseError, UsernameErrorReason
from .utils import BoundedInt

NO_USERNAME = "-"


class Username(str):
    """Login on the originating host.

    ``-`` marks a host without user ids and is represented as ``None`` on
    :class:`Origin`, never as a Username.
    """

    __slots__ = ()

    def __new__(cls, value: str):
        if not isinstance(value, str) or value == "":
            raise InvalidUsernameError(UsernameErrorReason.EMPTY, value)
        if value == NO_USERNAME:
            raise InvalidUsernameError(UsernameErrorReason.HYPHEN, value)
        if " " in value:
            raise InvalidUsernameError(UsernameErrorReason.HAS_SPACES, value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Username({str(self)!r})"


class SessionId(BoundedInt):
    __slots__ = ()


class SessionVersion(BoundedInt):
    """Increases whenever the session description is modified."""

    __slots__ = ()


@dataclass(frozen=True)
class Origin:
    username: Optional[Username]
    session_id: SessionId
    session_version: SessionVersion
    address: Address

    def __post_init__(self):
        if self.username is not None:
            object.__setattr__(self, "username", Username(self.username))
        object.__setattr__(self, "session_id", SessionId(self.session_id))
        object.__setattr__(self, "session_version", SessionVersion(self.session_version))

    def is_newer_than(self, other: "Origin") -> bool:
        return self.session_version > other.session_version

    @classmethod
    def parse(cls, text: str) -> "Origin":
        parts = text.split(" ", 3)
        if len(parts) != 4:
            raise SDPParseError(f"Malformed origin: {text!r}")
        username, session_id, session_version, address = parts
        return cls(
            username=None if username == NO_USERNAME else Username(username),
            session_id=SessionId(session_id),
            session_version=SessionVersion(session_version),
            address=parse_full_address(address),
        )

    def __str__(self) -> str:
        username = self.username if self.username is not None else NO_USERNAME
        return f"{username} {self.session_id} {self.session_version} {format_address(self.address)}"
