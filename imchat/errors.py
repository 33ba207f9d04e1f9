"""Error types carrying a numeric code, raised by validation and token handling."""

from __future__ import annotations

from typing import Any


class CodeError(Exception):
    """Base error with a numeric code, a message and optional key/value detail."""

    code: int = 0
    reason: str = "error"

    def __init__(self, message: str = "", **detail: Any) -> None:
        self.message = message or self.reason
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.detail:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.detail.items())
        return f"{self.message} {extra}"


class ArgsError(CodeError, ValueError):
    """A request argument is missing or invalid."""

    code = 1001
    reason = "ArgsError"


class RecordNotFoundError(CodeError, LookupError):
    """A requested record does not exist."""

    code = 1004
    reason = "RecordNotFoundError"


class TokenExpiredError(CodeError):
    """The token has expired."""

    code = 1501
    reason = "TokenExpiredError"


class TokenMalformedError(CodeError):
    """The token cannot be decoded."""

    code = 1503
    reason = "TokenMalformedError"


class TokenNotValidYetError(CodeError):
    """The token is not valid yet."""

    code = 1504
    reason = "TokenNotValidYetError"


class TokenUnknownError(CodeError):
    """The token is invalid for some other reason."""

    code = 1505
    reason = "TokenUnknownError"