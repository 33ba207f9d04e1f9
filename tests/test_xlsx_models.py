from imchat.xlsx_models import User
from imchat.xlsx_reader import Workbook, parse_sheet
from imchat.xlsx_values import get_sheet_name

COLUMNS = [
    "user_id",
    "nickname",
    "face_url",
    "birth",
    "gender",
    "area_code",
    "phone_number",
    "email",
    "account",
    "password",
]


def test_sheet_name():
    assert User.sheet_name() == "user"
    assert get_sheet_name(User) == "user"


def test_every_column_is_read():
    letters = "ABCDEFGHIJ"
    cells = {f"{letter}1": column for letter, column in zip(letters, COLUMNS)}
    cells.update({f"{letter}2": f"v-{column}" for letter, column in zip(letters, COLUMNS)})
    users = parse_sheet(Workbook({"user": cells}), User)
    assert len(users) == 1
    user = users[0]
    assert user.user_id == "v-user_id"
    assert user.nickname == "v-nickname"
    assert user.face_url == "v-face_url"
    assert user.birth == "v-birth"
    assert user.gender == "v-gender"
    assert user.area_code == "v-area_code"
    assert user.phone_number == "v-phone_number"
    assert user.email == "v-email"
    assert user.account == "v-account"
    assert user.password == "v-password"


def test_read_users_from_sheet():
    wb = Workbook(
        {
            "user": {
                "A1": "user_id",
                "B1": "nickname",
                "C1": "email",
                "D1": "account",
                "A2": "u1",
                "B2": "Alice",
                "C2": "alice@example.com",
                "A3": "u2",
                "D3": "bob",
            }
        }
    )
    users = parse_sheet(wb, User)
    assert users == [
        User(user_id="u1", nickname="Alice", email="alice@example.com"),
        User(user_id="u2", account="bob"),
    ]
    assert users[1].password == ""