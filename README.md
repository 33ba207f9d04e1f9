# imchat

Building blocks for the account side of an instant-messaging chat service:
session tokens, request validation, bulk user import from spreadsheets,
verification-code delivery and start-up health checks.

## Modules

- `imchat.tokens` — HS256 session tokens. `Token(expires, secret)` issues
  tokens with `create_token(user_id, user_type)`, which returns the signed
  token and its lifetime; `user_type` must be a `UserType` (`NORMAL` or
  `ADMIN`). `get_token(token)` verifies a token and returns
  `(user_id, UserType)`. Rejected tokens raise `TokenMalformedError`,
  `TokenExpiredError`, `TokenNotValidYetError` or `TokenUnknownError`.
- `imchat.errors` — the error hierarchy. Every error derives from `CodeError`,
  which carries a numeric `code`, a `message` and keyword `detail`.
  `ArgsError` (also a `ValueError`) reports invalid request arguments;
  `RecordNotFoundError` (also a `LookupError`) reports missing records.
- `imchat.chat_checks` — validation of chat-service requests:
  `email_check`, `phone_number_check`, `check_pagination` (with the
  `Pagination` dataclass), and `check_login`, `check_register_user`,
  `check_send_verify_code`, `check_verify_code`, `check_reset_password`,
  `check_change_password`, `check_update_user_info`, `check_user_ids`,
  `check_find_account_user`, `check_search_user_full_info` and
  `check_add_user_account`. Requests are any objects with the named
  attributes. A check returns nothing when the request is valid and raises
  `ArgsError` otherwise. `area_code_check` accepts any area code.
  `check_add_user_account` prefixes a missing `+` onto the request's area code.
- `imchat.admin_checks` — validation of admin-service requests in the same
  style: logins, password changes, default friend and group ID lists,
  paginated searches, invitation codes, IP bans, token requests, applets and
  admin accounts. `client_config_api_format` replaces a missing `config`
  mapping on a response with an empty one.
- `imchat.chat_client` — `ChatClient`, a convenience layer over a backend
  object you supply. It looks users up as lists (`find_user_public_info`,
  `find_user_full_info`), as maps keyed by user ID (`map_user_public_info`,
  `map_user_full_info`) or one at a time (`get_user_public_info`,
  `get_user_full_info`, which raise `RecordNotFoundError`), and passes
  `update_user`, `check_user_exist` and `del_user_account` through.
- `imchat.xlsx_reader` — reads `.xlsx` workbooks with the standard library
  only. `Workbook.open` takes bytes, a path or a binary file;
  `parse_sheet(workbook, Model)` reads a dataclass model's sheet into
  instances; `parse_all(source, *models)` returns one list per model.
  Row 1 names the columns; reading stops at the first empty row. A field's
  column comes from its `column` metadata (`"-"` skips it) or its name, and
  its value kind from `kind` metadata or its annotation.
- `imchat.xlsx_values` — `num_to_az` and `get_axis` turn column and row
  numbers into cell names such as `AA1`; `string_to_value` and `zero_value`
  convert cell text to `bool`, `string`, sized integer and float kinds;
  `get_sheet_name` names a model's sheet (its `sheet_name()` or class name).
- `imchat.xlsx_models` — `User`, the row model of the `user` import sheet.
- `imchat.mail` — `Mail` sends an HTML verification-code message over SMTP
  (implicit TLS on port 465, STARTTLS elsewhere when offered).
  `build_message` returns the message without sending it.
- `imchat.sms` — `SMS`, the abstract interface of text-message providers.
- `imchat.dataversion` — `check_version` and `set_version` record which
  one-off data migrations have run, in a collection object offering
  `find_one` and `update_one` the way a MongoDB collection does.
- `imchat.component_check` — `perform_checks(checks, max_retry, interval)`
  runs named callables until each has succeeded once, printing progress, and
  raises `RuntimeError` when the retry budget runs out.
- `imchat.version` — `get()` returns an `Info` describing the build and the
  running Python; `get_single_version()` returns the version string;
  `Output` and `ServerVersion` combine version reports, each with `to_dict`.
- `imchat.paths` — `out_dir` resolves an existing directory to an absolute
  path ending in `/`; `exit_with_error` and `sigterm_exit` report on stderr.

## Example

```python
from datetime import timedelta

from imchat.chat_checks import email_check
from imchat.errors import ArgsError
from imchat.tokens import Token, UserType
from imchat.xlsx_models import User
from imchat.xlsx_reader import parse_all
from imchat.xlsx_values import get_axis

token = Token(expires=timedelta(days=1), secret="secret")
signed, lifetime = token.create_token("user-1", UserType.NORMAL)
user_id, user_type = token.get_token(signed)

try:
    email_check("not-an-address")
except ArgsError as exc:
    print(exc)  # Email is invalid

print(get_axis(27, 1))  # AA1

(users,) = parse_all("users.xlsx", User)
```

## What this package does not do

It has no servers, no command-line programs and no storage of its own.
`ChatClient`, `check_version`/`set_version` and `perform_checks` work on
backend objects and callables that you provide; no text-message provider is
included, only the `SMS` interface to implement.

## Tests

The test suite uses pytest and is installed with the `test` extra.