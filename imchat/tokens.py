"""Creation and verification of signed user tokens."""

from __future__ import annotations

import datetime as dt
import enum
import time
from dataclasses import dataclass
from typing import Any

import jwt

from .errors import (
    TokenExpiredError,
    TokenMalformedError,
    TokenNotValidYetError,
    TokenUnknownError,
)

_ALGORITHM = "HS256"
_NOT_BEFORE_SKEW = dt.timedelta(minutes=1)


class UserType(enum.IntEnum):
    """Kinds of user a token may be issued for."""

    NORMAL = 1
    ADMIN = 2


_VALID_TYPES = frozenset(int(t) for t in UserType)


@dataclass
class Token:
    """Issues and checks HS256 tokens signed with a shared secret."""

    expires: dt.timedelta
    secret: str

    def _build_claims(self, user_id: str, user_type: int) -> dict[str, Any]:
        now = dt.datetime.now(dt.timezone.utc)
        return {
            "UserID": user_id,
            "UserType": int(user_type),
            "PlatformID": 0,
            "exp": int((now + self.expires).timestamp()),
            "nbf": int((now - _NOT_BEFORE_SKEW).timestamp()),
            "iat": int(now.timestamp()),
        }

    def create_token(self, user_id: str, user_type: int) -> tuple[str, dt.timedelta]:
        """Return a signed token for the user and its lifetime."""
        if int(user_type) not in _VALID_TYPES:
            raise TokenUnknownError("token type unknown")
        token = jwt.encode(
            self._build_claims(user_id, user_type), self.secret, algorithm=_ALGORITHM
        )
        return token, self.expires

    def _parse(self, token: str) -> tuple[str, int]:
        try:
            claims = jwt.decode(
                token,
                options={
                    "verify_signature": False,
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": False,
                },
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.ImmatureSignatureError as exc:
            raise TokenNotValidYetError() from exc
        except jwt.DecodeError as exc:
            raise TokenMalformedError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenUnknownError() from exc

        user_id = claims.get("UserID", "")
        user_type = claims.get("UserType", 0)
        platform_id = claims.get("PlatformID", 0)
        if (
            not isinstance(user_id, str)
            or not isinstance(user_type, int)
            or not isinstance(platform_id, int)
        ):
            raise TokenMalformedError()

        issued_at = claims.get("iat")
        if isinstance(issued_at, (int, float)) and issued_at > time.time():
            raise TokenUnknownError()

        try:
            jwt.decode(
                token,
                self.secret,
                algorithms=[_ALGORITHM],
                options={"verify_exp": False, "verify_nbf": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            raise TokenUnknownError() from exc

        if platform_id != 0:
            raise TokenExpiredError()
        return user_id, user_type

    def get_token(self, token: str) -> tuple[str, UserType]:
        """Verify a token and return its user ID and user type."""
        user_id, user_type = self._parse(token)
        if user_type not in _VALID_TYPES:
            raise TokenUnknownError("token type unknown")
        return user_id, UserType(user_type)