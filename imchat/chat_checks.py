"""Validation of requests made to the chat service.

Requests are plain objects read by attribute; any object with the named
attributes will do. Each check returns nothing and raises
:class:`~imchat.errors.ArgsError` on the first problem found.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import ArgsError

VERIFICATION_CODE_FOR_REGISTER = 1
VERIFICATION_CODE_FOR_RESET = 2
VERIFICATION_CODE_FOR_LOGIN = 3

FIND_ALL_USER = 0
FIND_NORMAL_USER = 1

IOS_PLATFORM_ID = 1
ADMIN_PLATFORM_ID = 10

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_UNSIGNED = re.compile(r"[0-9]+")
_UINT64_LIMIT = 1 << 64


@dataclass
class Pagination:
    """Page of results requested: 1-based page number and page size."""

    page_number: int = 0
    show_number: int = 0


def _is_uint64(text: str) -> bool:
    return bool(_UNSIGNED.fullmatch(text)) and int(text) < _UINT64_LIMIT


def email_check(email: str) -> None:
    """Raise ArgsError unless email looks like an e-mail address."""
    if not _EMAIL.fullmatch(email):
        raise ArgsError("Email is invalid")


def area_code_check(area_code: str) -> None:
    """Accept any area code; its format is not checked."""
    return None


def phone_number_check(phone_number: str) -> None:
    """Raise ArgsError unless the phone number is a non-empty unsigned number."""
    if phone_number == "":
        raise ArgsError("phoneNumber is empty")
    if not _is_uint64(phone_number):
        raise ArgsError("phoneNumber is invalid")


def check_pagination(pagination: Optional[Pagination]) -> None:
    """Raise ArgsError unless the pagination is present with positive fields."""
    if pagination is None:
        raise ArgsError("pagination is empty")
    if pagination.page_number < 1:
        raise ArgsError("pageNumber is invalid")
    if pagination.show_number < 1:
        raise ArgsError("showNumber is invalid")


def _check_contact(email: str, area_code: str, phone_number: str) -> None:
    if email:
        email_check(email)
        return
    if area_code == "":
        raise ArgsError("AreaCode is empty")
    area_code_check(area_code)
    if phone_number == "":
        raise ArgsError("PhoneNumber is empty")
    phone_number_check(phone_number)


def _check_platform(platform: int) -> None:
    if not IOS_PLATFORM_ID <= platform <= ADMIN_PLATFORM_ID:
        raise ArgsError("platform is invalid")


def check_update_user_info(req: Any) -> None:
    """Check a user info update: user_id is required, email if set must be valid."""
    if not req.user_id:
        raise ArgsError("userID is empty")
    email = getattr(req, "email", None)
    value = getattr(email, "value", email)
    if value:
        email_check(value)


def check_user_ids(req: Any) -> None:
    """Check that the request carries a list of user IDs."""
    if req.user_ids is None:
        raise ArgsError("userIDs is empty")


def check_send_verify_code(req: Any) -> None:
    """Check a request to send a verification code."""
    if not VERIFICATION_CODE_FOR_REGISTER <= req.used_for <= VERIFICATION_CODE_FOR_LOGIN:
        raise ArgsError("usedFor flied is empty")
    _check_contact(req.email, req.area_code, req.phone_number)


def check_verify_code(req: Any) -> None:
    """Check a request to verify a code."""
    _check_contact(req.email, req.area_code, req.phone_number)
    if not req.verify_code:
        raise ArgsError("VerifyCode is empty")


def check_register_user(req: Any) -> None:
    """Check a user registration request."""
    user = req.user
    if user is None:
        raise ArgsError("user is empty")
    if not user.nickname:
        raise ArgsError("Nickname is nil")
    _check_platform(req.platform)
    _check_contact(user.email, user.area_code, user.phone_number)


def check_login(req: Any) -> None:
    """Check a login request."""
    _check_platform(req.platform)
    _check_contact(req.email, req.area_code, req.phone_number)


def check_reset_password(req: Any) -> None:
    """Check a password reset request."""
    if not req.password:
        raise ArgsError("password is empty")
    _check_contact(req.email, req.area_code, req.phone_number)
    if not req.verify_code:
        raise ArgsError("VerifyCode is empty")


def check_change_password(req: Any) -> None:
    """Check a password change request."""
    if not req.user_id:
        raise ArgsError("userID is empty")
    if not req.new_password:
        raise ArgsError("newPassword is empty")


def check_find_account_user(req: Any) -> None:
    """Check that the request carries a list of accounts."""
    if req.accounts is None:
        raise ArgsError("Accounts is empty")


def check_search_user_full_info(req: Any) -> None:
    """Check a paginated search of full user info."""
    check_pagination(req.pagination)
    if not FIND_ALL_USER <= req.normal <= FIND_NORMAL_USER:
        raise ArgsError("normal flied is invalid")


def check_add_user_account(req: Any) -> None:
    """Check a request adding a user account.

    An area code without a leading '+' is given one on the request itself.
    """
    user = req.user
    if user is None:
        raise ArgsError("user is empty")
    if user.email:
        try:
            email_check(user.email)
        except ArgsError:
            raise ArgsError("email must be right") from None
        return
    if not user.area_code or not user.phone_number:
        raise ArgsError("area code or phone number is empty")
    if not user.area_code.startswith("+"):
        user.area_code = "+" + user.area_code
    if not _is_uint64(user.area_code[1:]):
        raise ArgsError("area code must be number")
    if not _is_uint64(user.phone_number):
        raise ArgsError("phone number must be number")