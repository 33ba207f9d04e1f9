"""Convenience layer over a chat service backend.

The backend is any object offering ``find_user_public_info(user_ids)`` and
``find_user_full_info(user_ids)``, each returning a list of user records with
a ``user_id`` attribute, and ``update_user_info(req)``,
``check_user_exist(req)`` and ``del_user_account(req)``.
"""

from __future__ import annotations

from typing import Any, Iterable

from .errors import RecordNotFoundError


class ChatClient:
    """Looks users up and updates them through a chat service backend."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def find_user_public_info(self, user_ids: Iterable[str]) -> list[Any]:
        """Return the public info of the given users; no IDs gives []."""
        ids = list(user_ids)
        if not ids:
            return []
        return list(self._client.find_user_public_info(ids))

    def map_user_public_info(self, user_ids: Iterable[str]) -> dict[str, Any]:
        """Return the public info of the given users keyed by user ID."""
        return {user.user_id: user for user in self.find_user_public_info(user_ids)}

    def find_user_full_info(self, user_ids: Iterable[str]) -> list[Any]:
        """Return the full info of the given users; no IDs gives []."""
        ids = list(user_ids)
        if not ids:
            return []
        return list(self._client.find_user_full_info(ids))

    def map_user_full_info(self, user_ids: Iterable[str]) -> dict[str, Any]:
        """Return the full info of the given users keyed by user ID."""
        return {user.user_id: user for user in self.find_user_full_info(user_ids)}

    def get_user_full_info(self, user_id: str) -> Any:
        """Return the full info of one user or raise RecordNotFoundError."""
        users = self.find_user_full_info([user_id])
        if not users:
            raise RecordNotFoundError("user id not found")
        return users[0]

    def get_user_public_info(self, user_id: str) -> Any:
        """Return the public info of one user or raise RecordNotFoundError."""
        users = self.find_user_public_info([user_id])
        if not users:
            raise RecordNotFoundError("user id not found", userID=user_id)
        return users[0]

    def update_user(self, req: Any) -> None:
        """Apply a user info update."""
        self._client.update_user_info(req)

    def check_user_exist(self, req: Any) -> Any:
        """Return the backend's answer to whether a user exists."""
        return self._client.check_user_exist(req)

    def del_user_account(self, req: Any) -> Any:
        """Delete user accounts and return the backend's response."""
        return self._client.del_user_account(req)