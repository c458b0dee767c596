"""RTP header extension mapping attribute (RFC 8285).

    a=extmap:<value>["/"<direction>] <URI> <extensionattributes>

Parsing is strict enough that every accepted payload marshals back to the
exact same text: single-space separators, no leading zeros in the id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Union

from .attribute import join_attribute, marshal_line, register_attribute, split_attribute, unmarshal_line
from .contact import Uri
from .exceptions import (
    InvalidDirectionError,
    InvalidExtensionIdError,
    InvalidNumberError,
    InvalidUriError,
    ExtMapUriError,
    MalformedExtMapError,
)
from .utils import BoundedInt, has_line_break, logger

EXTMAP_KEY = "extmap"

# 0 is the one-byte header padding value; ids above 255 don't fit the
# two-byte header's id field.
EXTMAP_ID_MIN = 1
EXTMAP_ID_MAX = 255

AUDIO_LEVEL_URI = "urn:ietf:params:rtp-hdrext:ssrc-audio-level"
TOFFSET_URI = "urn:ietf:params:rtp-hdrext:toffset"
SDES_MID_URI = "urn:ietf:params:rtp-hdrext:sdes:mid"
SDES_RTP_STREAM_ID_URI = "urn:ietf:params:rtp-hdrext:sdes:rtp-stream-id"
ABS_SEND_TIME_URI = "http://www.webrtc.org/experiments/rtp-hdrext/abs-send-time"
TRANSPORT_CC_URI = "http://www.ietf.org/id/draft-holmer-rmcat-transport-wide-cc-extensions-01"
VIDEO_ORIENTATION_URI = "urn:3gpp:video-orientation"


def _has_whitespace(token: str) -> bool:
    return any(ch.isspace() for ch in token)


class ExtensionId(BoundedInt):
    __slots__ = ()

    MIN = EXTMAP_ID_MIN
    MAX = EXTMAP_ID_MAX


class Direction(StrEnum):
    """Stream direction; UNSPECIFIED means no ``/direction`` suffix at all."""

    UNSPECIFIED = ""
    SENDRECV = "sendrecv"
    SENDONLY = "sendonly"
    RECVONLY = "recvonly"
    INACTIVE = "inactive"

    @classmethod
    def parse(cls, token: str) -> "Direction":
        """Match a ``/direction`` token; case-sensitive, never UNSPECIFIED."""
        for direction in cls:
            if direction is not cls.UNSPECIFIED and direction.value == token:
                return direction
        raise InvalidDirectionError(f"Unknown extmap direction: {token!r}")


@register_attribute(EXTMAP_KEY)
@dataclass(frozen=True)
class ExtMap:
    value: ExtensionId
    direction: Direction = Direction.UNSPECIFIED
    uri: Optional[Uri] = None
    extension_attributes: Optional[str] = None

    def __post_init__(self):
        try:
            object.__setattr__(self, "value", ExtensionId(self.value))
        except InvalidNumberError as exc:
            raise InvalidExtensionIdError(f"Invalid extension id: {self.value!r}") from exc
        if self.direction is None:
            object.__setattr__(self, "direction", Direction.UNSPECIFIED)
        elif not isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", Direction.parse(self.direction))
        if self.uri is not None:
            try:
                object.__setattr__(self, "uri", Uri(self.uri))
            except InvalidUriError as exc:
                raise ExtMapUriError(f"Invalid extension URI: {self.uri!r}") from exc
        if self.extension_attributes is not None:
            if self.uri is None:
                raise MalformedExtMapError("Extension attributes require a URI")
            if not isinstance(self.extension_attributes, str):
                raise MalformedExtMapError("Extension attributes must be text")
            if has_line_break(self.extension_attributes):
                raise MalformedExtMapError("Extension attributes cannot contain CR or LF")

    @classmethod
    def unmarshal(cls, text: str) -> "ExtMap":
        """Parse ``extmap:<value>[/<direction>] [<uri> [<extension attributes>]]``."""
        key, payload = split_attribute(text)
        if key != EXTMAP_KEY:
            raise MalformedExtMapError(f"Expected {EXTMAP_KEY!r} attribute, got {key!r}")
        if not payload:
            raise MalformedExtMapError("Empty extmap value")

        head, has_uri, rest = payload.partition(" ")
        if _has_whitespace(head):
            raise MalformedExtMapError(f"Fields must be separated by a single space: {payload!r}")
        value_text, has_direction, direction_text = head.partition("/")
        try:
            value = ExtensionId(value_text)
        except InvalidNumberError as exc:
            raise InvalidExtensionIdError(f"Invalid extension id: {value_text!r}") from exc

        direction = Direction.parse(direction_text) if has_direction else Direction.UNSPECIFIED

        uri = None
        extension_attributes = None
        if has_uri:
            uri_text, has_ext, ext_text = rest.partition(" ")
            if _has_whitespace(uri_text):
                raise MalformedExtMapError(f"Fields must be separated by a single space: {payload!r}")
            try:
                uri = Uri(uri_text)
            except InvalidUriError as exc:
                raise ExtMapUriError(f"Invalid extension URI: {uri_text!r}") from exc
            if has_ext:
                extension_attributes = ext_text

        logger.debug("parsed extmap %d -> %s", value, uri)
        return cls(value, direction, uri, extension_attributes)

    @classmethod
    def from_line(cls, line: Union[str, bytes]) -> "ExtMap":
        """Parse a full ``a=extmap:...\\r\\n`` wire line."""
        return cls.unmarshal(join_attribute(*unmarshal_line(line)))

    def payload(self) -> str:
        """Everything after ``extmap:``."""
        out = str(self.value)
        if self.direction is not Direction.UNSPECIFIED:
            out += f"/{self.direction}"
        if self.uri is not None:
            out += f" {self.uri}"
        if self.extension_attributes is not None:
            out += f" {self.extension_attributes}"
        return out

    def marshal(self) -> str:
        return join_attribute(EXTMAP_KEY, self.payload())

    def to_line(self) -> str:
        return marshal_line(EXTMAP_KEY, self.payload())

    def __str__(self) -> str:
        return self.marshal()
