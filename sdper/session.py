"""Session name (``s=``) and session information (``i=``)."""

from __future__ import annotations

from .exceptions import InvalidSessionNameError, SessionNameErrorReason
from .utils import Text, has_line_break

# RFC 4566 section 5.3: "s= " when a session has no meaningful name.
DEFAULT_SESSION_NAME = " "


class SessionName(str):
    __slots__ = ()

    def __new__(cls, value: str):
        if not isinstance(value, str) or value == "":
            raise InvalidSessionNameError(SessionNameErrorReason.EMPTY, value)
        if has_line_break(value):
            raise InvalidSessionNameError(SessionNameErrorReason.HAS_LINE_BREAK, value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"SessionName({str(self)!r})"

    @classmethod
    def default(cls) -> "SessionName":
        return cls(DEFAULT_SESSION_NAME)


class SessionInformation(Text):
    __slots__ = ()
