"""SDP-specific exception hierarchy."""

from __future__ import annotations

from enum import StrEnum


class SDPError(Exception):
    """Base SDP exception."""
    pass

class SDPValidationError(SDPError):
    """Raised when a value fails its validating constructor."""

    def __init__(self, reason: StrEnum, value: object = None):
        self.reason = reason
        self.value = value
        super().__init__(f"{reason}: {value!r}")

class SDPCodecError(SDPError):
    """Raised when an attribute line cannot be framed."""
    pass

class SDPParseError(SDPError):
    """Raised when a field or attribute payload cannot be parsed."""
    pass


# validation reasons

class UsernameErrorReason(StrEnum):
    EMPTY = "cannot be empty"
    HYPHEN = "cannot be `-` (hyphen), use None instead"
    HAS_SPACES = "cannot contain spaces"

class SessionNameErrorReason(StrEnum):
    EMPTY = "cannot be empty"
    HAS_LINE_BREAK = "cannot contain CR or LF"

class BandwidthTypeErrorReason(StrEnum):
    EMPTY = "cannot be empty"
    INVALID_CHARACTERS = "cannot contain non-alphanumeric symbols"
    RESERVED = "is a predefined bwtype, use its own variant"

class NumberErrorReason(StrEnum):
    NOT_A_NUMBER = "is not a decimal integer"
    NOT_CANONICAL = "has leading zeros or a negative zero"
    OUT_OF_RANGE = "is out of range"

class TextErrorReason(StrEnum):
    EMPTY = "cannot be empty"
    HAS_LINE_BREAK = "cannot contain CR or LF"

class UriErrorReason(StrEnum):
    EMPTY = "cannot be empty"
    HAS_WHITESPACE = "cannot contain whitespace"
    NOT_ABSOLUTE = "is not an absolute URI"

class AddressErrorReason(StrEnum):
    EMPTY = "cannot be empty"
    UNKNOWN_NETTYPE = "network type must be IN"
    UNKNOWN_ADDRTYPE = "address type must be IP4 or IP6"
    ADDRTYPE_MISMATCH = "address type does not match IP version"
    MALFORMED = "must be <nettype> <addrtype> <address>"

class KeyErrorReason(StrEnum):
    UNKNOWN_METHOD = "unknown key method"
    MISSING_PAYLOAD = "key method requires a payload"
    UNEXPECTED_PAYLOAD = "prompt takes no payload"
    INVALID_BASE64 = "payload is not valid base64"


class InvalidUsernameError(SDPValidationError):
    """Username is empty, a hyphen or contains spaces."""

class InvalidSessionNameError(SDPValidationError):
    """Session name is empty or spans lines."""

class InvalidBandwidthTypeError(SDPValidationError):
    """Bandwidth type token does not match ``(X-)?[A-Za-z0-9]+``."""

class InvalidNumberError(SDPValidationError):
    """Integer field is not decimal or does not fit its width."""

class InvalidTextError(SDPValidationError):
    """Free-text field is empty or spans lines."""

class InvalidUriError(SDPValidationError):
    """Text is not an absolute URI."""

class InvalidAddressError(SDPValidationError):
    """Connection address is malformed."""

class InvalidKeyError(SDPValidationError):
    """Encryption key field is malformed."""


# codec errors

class MissingPrefixError(SDPCodecError):
    """Line does not start with the attribute marker."""
    pass

class MissingTerminatorError(SDPCodecError):
    """Line does not end with CRLF."""
    pass

class MalformedLineError(SDPCodecError):
    """Line has an empty key or stray line breaks."""
    pass


# attribute parse errors

class ExtMapError(SDPParseError):
    """Base for extmap attribute failures."""
    pass

class MalformedExtMapError(ExtMapError):
    """Wrong key, empty payload or missing fields."""
    pass

class InvalidExtensionIdError(ExtMapError):
    """Extension id is not numeric or outside 1-255."""
    pass

class InvalidDirectionError(ExtMapError):
    """Direction token is not one of the four known directions."""
    pass

class ExtMapUriError(ExtMapError):
    """Extension URI is not an absolute URI."""
    pass
