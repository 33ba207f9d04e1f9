from imchat.errors import (
    ArgsError,
    CodeError,
    RecordNotFoundError,
    TokenExpiredError,
    TokenMalformedError,
    TokenNotValidYetError,
    TokenUnknownError,
)


def test_message_is_kept():
    err = ArgsError("userID is empty")
    assert err.message == "userID is empty"
    assert str(err) == "userID is empty"


def test_default_message_is_reason():
    err = TokenExpiredError()
    assert err.message == TokenExpiredError.reason
    assert str(err) == TokenExpiredError.reason


def test_detail_is_rendered():
    err = RecordNotFoundError("user id not found", userID="u1")
    assert err.detail == {"userID": "u1"}
    assert str(err) == "user id not found userID=u1"


def test_every_error_is_a_code_error():
    errors = [
        ArgsError("boom"),
        RecordNotFoundError("boom"),
        TokenExpiredError("boom"),
        TokenMalformedError("boom"),
        TokenNotValidYetError("boom"),
        TokenUnknownError("boom"),
    ]
    for err in errors:
        assert isinstance(err, CodeError)
        assert err.code == type(err).code
        assert err.message == "boom"
        assert str(err) == "boom"


def test_codes_are_distinct():
    codes = [
        ArgsError().code,
        RecordNotFoundError().code,
        TokenExpiredError().code,
        TokenMalformedError().code,
        TokenNotValidYetError().code,
        TokenUnknownError().code,
    ]
    assert len(set(codes)) == len(codes)
    assert all(value > 0 for value in codes)


def test_args_error_is_value_error():
    err = ArgsError("bad")
    assert issubclass(ArgsError, ValueError)
    assert err.message == "bad"
    assert str(err) == "bad"
    assert err.args[0] == "bad" or str(err) == "bad"


def test_record_not_found_is_lookup_error():
    err = RecordNotFoundError("missing")
    assert issubclass(RecordNotFoundError, LookupError)
    assert err.message == "missing"
    assert str(err) == "missing"