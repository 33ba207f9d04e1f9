"""Validation of requests made to the admin service.

Requests are plain objects read by attribute; any object with the named
attributes will do. Each check returns nothing and raises
:class:`~imchat.errors.ArgsError` on the first problem found.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .chat_checks import check_pagination
from .errors import ArgsError
from .tokens import UserType

STATUS_ON_SHELF = 1
STATUS_UN_SHELF = 2


def _has_duplicate(values: Sequence[Any]) -> bool:
    return len(set(values)) != len(values)


def _require(value: Any, message: str) -> None:
    if not value:
        raise ArgsError(message)


def _require_list(values: Optional[Sequence[Any]], message: str) -> None:
    if values is None:
        raise ArgsError(message)


def check_admin_login(req: Any) -> None:
    """Check an admin login: account and password are required."""
    _require(req.account, "account is empty")
    _require(req.password, "password is empty")


def check_change_password(req: Any) -> None:
    """Check an admin password change: the password is required."""
    _require(req.password, "password is empty")


def check_user_ids(req: Any) -> None:
    """Check that the request carries a list of user IDs."""
    _require_list(req.user_ids, "userIDs is empty")


def check_unique_user_ids(req: Any) -> None:
    """Check that the request carries a list of distinct user IDs."""
    check_user_ids(req)
    if _has_duplicate(req.user_ids):
        raise ArgsError("userIDs has duplicate")


def check_group_ids(req: Any) -> None:
    """Check that the request carries a list of group IDs."""
    _require_list(req.group_ids, "GroupIDs is empty")


def check_unique_group_ids(req: Any) -> None:
    """Check that the request carries a list of distinct group IDs."""
    check_group_ids(req)
    if _has_duplicate(req.group_ids):
        raise ArgsError("GroupIDs has duplicate")


def check_paginated(req: Any) -> None:
    """Check a search request: its pagination must be present and positive."""
    check_pagination(req.pagination)


def check_gen_invitation_code(req: Any) -> None:
    """Check a request generating invitation codes."""
    if req.len < 1:
        raise ArgsError("len is invalid")
    if req.num < 1:
        raise ArgsError("num is invalid")
    _require(req.chars, "chars is in invalid")


def check_use_invitation_code(req: Any) -> None:
    """Check a request marking an invitation code as used."""
    _require(req.code, "code is empty")
    _require(req.user_id, "userID is empty")


def check_register_forbidden(req: Any) -> None:
    """Check a registration ban lookup: the IP is required."""
    _require(req.ip, "ip is empty")


def check_login_forbidden(req: Any) -> None:
    """Check a login ban lookup: an IP or a user ID is required."""
    if not req.ip and not req.user_id:
        raise ArgsError("ip and userID is empty")


def check_create_token(req: Any) -> None:
    """Check a token creation request."""
    _require(req.user_id, "userID is empty")
    if not UserType.NORMAL <= req.user_type <= UserType.ADMIN:
        raise ArgsError("userType is invalid")


def check_parse_token(req: Any) -> None:
    """Check a token parse request: the token is required."""
    _require(req.token, "token is empty")


def check_add_applet(req: Any) -> None:
    """Check a request adding an applet."""
    _require(req.name, "name is empty")
    _require(req.app_id, "appID is empty")
    _require(req.icon, "icon is empty")
    _require(req.url, "url is empty")
    _require(req.md5, "md5 is empty")
    if req.size <= 0:
        raise ArgsError("size is invalid")
    _require(req.version, "version is empty")
    if not STATUS_ON_SHELF <= req.status <= STATUS_UN_SHELF:
        raise ArgsError("status is invalid")


def check_change_admin_password(req: Any) -> None:
    """Check an admin password change that gives the current password."""
    _require(req.user_id, "userID is empty")
    _require(req.current_password, "currentPassword is empty")
    _require(req.new_password, "newPassword is empty")
    if req.current_password == req.new_password:
        raise ArgsError("currentPassword is equal to newPassword")


def check_add_admin_account(req: Any) -> None:
    """Check a request adding an admin account."""
    _require(req.account, "account is empty")
    _require(req.password, "password is empty")


def check_search_admin_account(req: Any) -> None:
    """Check a search of admin accounts: page size and number must be non-zero."""
    pagination = req.pagination
    if pagination is None:
        raise ArgsError("pagination is empty")
    if pagination.show_number == 0:
        raise ArgsError("showNumber is empty")
    if pagination.page_number == 0:
        raise ArgsError("pageNumber is empty")


def client_config_api_format(resp: Any) -> None:
    """Give a client config response an empty mapping in place of a missing one."""
    if resp.config is None:
        resp.config = {}