from types import SimpleNamespace

import pytest

from imchat.chat_client import ChatClient
from imchat.errors import RecordNotFoundError


class FakeBackend:
    def __init__(self, users=(), fail=False):
        self.users = {u.user_id: u for u in users}
        self.calls = []
        self.fail = fail

    def _find(self, user_ids):
        if self.fail:
            raise RuntimeError("backend down")
        return [self.users[i] for i in user_ids if i in self.users]

    def find_user_public_info(self, user_ids):
        self.calls.append(("public", list(user_ids)))
        return self._find(user_ids)

    def find_user_full_info(self, user_ids):
        self.calls.append(("full", list(user_ids)))
        return self._find(user_ids)

    def update_user_info(self, req):
        self.calls.append(("update", req))

    def check_user_exist(self, req):
        return SimpleNamespace(exist=req.user_id in self.users)

    def del_user_account(self, req):
        return SimpleNamespace(deleted=list(req.user_ids))


def _users():
    return [SimpleNamespace(user_id="u1", nickname="a"), SimpleNamespace(user_id="u2", nickname="b")]


def test_empty_ids_skip_backend():
    backend = FakeBackend(_users())
    client = ChatClient(backend)
    assert client.find_user_public_info([]) == []
    assert client.find_user_full_info([]) == []
    assert client.map_user_full_info([]) == {}
    assert backend.calls == []


def test_find_and_map():
    users = _users()
    client = ChatClient(FakeBackend(users))
    assert client.find_user_public_info(["u1", "u2"]) == users
    mapped = client.map_user_public_info(["u1", "u2"])
    assert mapped == {"u1": users[0], "u2": users[1]}
    assert client.map_user_full_info(["u2"]) == {"u2": users[1]}


def test_get_single_user():
    users = _users()
    client = ChatClient(FakeBackend(users))
    assert client.get_user_full_info("u1") is users[0]
    assert client.get_user_public_info("u2") is users[1]


def test_get_missing_user_raises():
    client = ChatClient(FakeBackend(_users()))
    with pytest.raises(RecordNotFoundError, match="user id not found"):
        client.get_user_full_info("missing")
    with pytest.raises(RecordNotFoundError) as info:
        client.get_user_public_info("missing")
    assert info.value.detail == {"userID": "missing"}


def test_backend_errors_propagate():
    client = ChatClient(FakeBackend(fail=True))
    with pytest.raises(RuntimeError, match="backend down"):
        client.map_user_public_info(["u1"])


def test_passthrough_calls():
    backend = FakeBackend(_users())
    client = ChatClient(backend)
    req = SimpleNamespace(user_id="u1")
    client.update_user(req)
    assert backend.calls == [("update", req)]
    assert client.check_user_exist(req).exist is True
    assert client.check_user_exist(SimpleNamespace(user_id="zz")).exist is False
    assert client.del_user_account(SimpleNamespace(user_ids=["u1"])).deleted == ["u1"]