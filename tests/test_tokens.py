import datetime as dt
import time

import jwt
import pytest

from imchat.errors import (
    TokenExpiredError,
    TokenMalformedError,
    TokenNotValidYetError,
    TokenUnknownError,
)
from imchat.tokens import Token, UserType

HOUR = dt.timedelta(hours=1)


def make_token(expires=HOUR):
    return Token(expires=expires, secret="secret")


def craft(claims, key="secret"):
    return jwt.encode(claims, key, algorithm="HS256")


def valid_claims(**overrides):
    now = int(time.time())
    claims = {
        "UserID": "u1",
        "UserType": 1,
        "PlatformID": 0,
        "exp": now + 3600,
        "nbf": now - 60,
        "iat": now,
    }
    claims.update(overrides)
    return claims


@pytest.mark.parametrize("user_type", [UserType.NORMAL, UserType.ADMIN])
def test_round_trip(user_type):
    tok = make_token()
    token, expires = tok.create_token("u1", user_type)
    assert expires == HOUR
    assert tok.get_token(token) == ("u1", user_type)


def test_round_trip_with_plain_int_type():
    tok = make_token()
    token, _ = tok.create_token("admin", 2)
    user_id, user_type = tok.get_token(token)
    assert user_id == "admin"
    assert user_type is UserType.ADMIN


def test_claims_layout():
    tok = make_token()
    token, _ = tok.create_token("u1", UserType.NORMAL)
    claims = jwt.decode(token, "secret", algorithms=["HS256"])
    assert claims["UserID"] == "u1"
    assert claims["UserType"] == 1
    assert claims["PlatformID"] == 0
    assert claims["exp"] - claims["iat"] == 3600
    assert claims["iat"] - claims["nbf"] == 60


def test_create_rejects_unknown_type():
    with pytest.raises(TokenUnknownError):
        make_token().create_token("u1", 3)


def test_expired_token():
    tok = make_token(expires=-HOUR)
    token, _ = tok.create_token("u1", UserType.NORMAL)
    with pytest.raises(TokenExpiredError):
        tok.get_token(token)


def test_malformed_token():
    with pytest.raises(TokenMalformedError):
        make_token().get_token("not-a-jwt")


def test_wrong_secret_is_unknown():
    token, _ = make_token().create_token("u1", UserType.NORMAL)
    other = Token(expires=HOUR, secret="placeholder")
    with pytest.raises(TokenUnknownError):
        other.get_token(token)


def test_not_valid_yet():
    now = int(time.time())
    token = craft(valid_claims(nbf=now + 3600, exp=now + 7200))
    with pytest.raises(TokenNotValidYetError):
        make_token().get_token(token)


def test_platform_id_means_expired():
    token = craft(valid_claims(PlatformID=3))
    with pytest.raises(TokenExpiredError):
        make_token().get_token(token)


def test_unknown_user_type_in_token():
    token = craft(valid_claims(UserType=7))
    with pytest.raises(TokenUnknownError):
        make_token().get_token(token)


def test_expired_beats_bad_signature():
    now = int(time.time())
    token = craft(valid_claims(exp=now - 10), key="placeholder")
    with pytest.raises(TokenExpiredError):
        make_token().get_token(token)


def test_wrong_claim_type_is_malformed():
    token = craft(valid_claims(UserType="admin"))
    with pytest.raises(TokenMalformedError):
        make_token().get_token(token)