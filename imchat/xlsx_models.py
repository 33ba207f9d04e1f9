"""Models of sheets read from imported workbooks."""

from __future__ import annotations

from dataclasses import dataclass, field


def _column(name: str) -> str:
    return field(default="", metadata={"column": name})


@dataclass
class User:
    """A row of the user import sheet."""

    user_id: str = _column("user_id")
    nickname: str = _column("nickname")
    face_url: str = _column("face_url")
    birth: str = _column("birth")
    gender: str = _column("gender")
    area_code: str = _column("area_code")
    phone_number: str = _column("phone_number")
    email: str = _column("email")
    account: str = _column("account")
    password: str = _column("password")

    @classmethod
    def sheet_name(cls) -> str:
        """Name of the sheet users are read from."""
        return "user"