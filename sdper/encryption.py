"""Encryption key field (``k=``), RFC 4566 section 5.12.

``clear`` and ``base64`` payloads are held as pydantic ``SecretStr`` so
repr(), str() and logging show a mask. ``marshal()`` is the only call
that renders the payload.
"""

from __future__ import annotations

import binascii
from base64 import b64decode
from dataclasses import dataclass
from typing import ClassVar, Union

from pydantic import SecretStr

from .contact import Uri
from .exceptions import InvalidKeyError, InvalidTextError, KeyErrorReason
from .utils import Text

MASK = "**********"


def _as_secret(value: Union[str, SecretStr]) -> SecretStr:
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    try:
        Text(value)
    except InvalidTextError as exc:
        reason = exc.reason
    else:
        return SecretStr(value)
    # raised outside the handler so the payload-bearing error isn't chained
    raise InvalidTextError(reason, MASK)


@dataclass(frozen=True)
class _SecretKey:
    secret: SecretStr

    method: ClassVar[str] = ""

    def __post_init__(self):
        object.__setattr__(self, "secret", _as_secret(self.secret))

    def marshal(self) -> str:
        return f"{self.method}:{self.secret.get_secret_value()}"

    def __str__(self) -> str:
        return f"{self.method}:{MASK}"


@dataclass(frozen=True)
class ClearKey(_SecretKey):
    """``k=clear:<encryption key>``"""

    method: ClassVar[str] = "clear"


@dataclass(frozen=True)
class Base64Key(_SecretKey):
    """``k=base64:<encoded encryption key>``"""

    method: ClassVar[str] = "base64"

    def __post_init__(self):
        super().__post_init__()
        try:
            b64decode(self.secret.get_secret_value(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidKeyError(KeyErrorReason.INVALID_BASE64, MASK) from exc

    def decoded(self) -> bytes:
        return b64decode(self.secret.get_secret_value(), validate=True)


@dataclass(frozen=True)
class UriKey:
    """``k=uri:<URI to obtain key>``"""

    uri: Uri

    method: ClassVar[str] = "uri"

    def __post_init__(self):
        object.__setattr__(self, "uri", Uri(self.uri))

    def marshal(self) -> str:
        return f"{self.method}:{self.uri}"

    def __str__(self) -> str:
        return self.marshal()


@dataclass(frozen=True)
class PromptKey:
    """``k=prompt``: ask the user for the key when joining."""

    method: ClassVar[str] = "prompt"

    def marshal(self) -> str:
        return self.method

    def __str__(self) -> str:
        return self.method


EncryptionKey = Union[ClearKey, Base64Key, UriKey, PromptKey]


def parse_key(text: str) -> EncryptionKey:
    method, sep, payload = text.partition(":")
    if method == PromptKey.method:
        if sep:
            raise InvalidKeyError(KeyErrorReason.UNEXPECTED_PAYLOAD, method)
        return PromptKey()
    if method not in (ClearKey.method, Base64Key.method, UriKey.method):
        raise InvalidKeyError(KeyErrorReason.UNKNOWN_METHOD, method)
    if not payload:
        raise InvalidKeyError(KeyErrorReason.MISSING_PAYLOAD, method)
    if method == UriKey.method:
        return UriKey(Uri(payload))
    if method == Base64Key.method:
        return Base64Key(SecretStr(payload))
    return ClearKey(SecretStr(payload))
