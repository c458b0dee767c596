"""URI, email and phone leaves (``u=``, ``e=``, ``p=``).

The email and phone fields are carried verbatim; only the single-line
text rule is enforced. URIs must be absolute, as both ``u=`` and the
URI-valued attributes (``extmap``, ``k=uri:``) require.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .exceptions import InvalidUriError, UriErrorReason
from .utils import Text

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


class Uri(str):
    """Absolute URI kept byte-for-byte as received."""

    __slots__ = ()

    def __new__(cls, value: str):
        if not isinstance(value, str) or value == "":
            raise InvalidUriError(UriErrorReason.EMPTY, value)
        if any(ch.isspace() for ch in value):
            raise InvalidUriError(UriErrorReason.HAS_WHITESPACE, value)
        try:
            parsed = urlsplit(value)
        except ValueError as exc:
            raise InvalidUriError(UriErrorReason.NOT_ABSOLUTE, value) from exc
        if not parsed.scheme or not _SCHEME_RE.fullmatch(parsed.scheme):
            raise InvalidUriError(UriErrorReason.NOT_ABSOLUTE, value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Uri({str(self)!r})"

    @property
    def scheme(self) -> str:
        return self.split(":", 1)[0].lower()


class Email(Text):
    """``e=`` value, e.g. ``j.doe@example.com (Jane Doe)``."""

    __slots__ = ()


class Phone(Text):
    """``p=`` value, e.g. ``+1 617 555-6011``."""

    __slots__ = ()
