import smtplib
from unittest import mock

import pytest

from imchat.mail import Mail


def _mail(port=587):
    return Mail(
        smtp_addr="smtp.example.com",
        smtp_port=port,
        sender_mail="sender@example.com",
        sender_authorization_code="secret",
        title="Verification",
    )


def test_name():
    assert _mail().name() == "mail"


def test_build_message():
    message = _mail().build_message("user@example.com", "5555")
    assert message["From"] == "sender@example.com"
    assert message["To"] == "user@example.com"
    assert message["Subject"] == "Verification"
    assert message.get_content_type() == "text/html"
    assert message.get_content().strip() == (
        "Your verification code is: 5555. This code is valid for 5 minutes "
        "and should not be shared with others"
    )


def test_secret_not_in_repr():
    assert "secret" not in repr(_mail())


def test_send_with_starttls():
    mail = _mail()
    expected = mail.build_message("user@example.com", "5555")
    with mock.patch("smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value
        mail.send_mail("user@example.com", "5555")
    smtp_cls.assert_called_once()
    assert smtp_cls.call_args.args == ("smtp.example.com", 587)
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("sender@example.com", "secret")
    sent = server.send_message.call_args.args[0]
    assert sent["To"] == expected["To"] == "user@example.com"
    assert sent["Subject"] == expected["Subject"]
    assert sent.get_content() == expected.get_content()


def test_send_over_ssl_port():
    mail = _mail(port=465)
    expected = mail.build_message("user@example.com", "1234")
    with mock.patch("smtplib.SMTP_SSL") as ssl_cls, mock.patch("smtplib.SMTP") as plain_cls:
        server = ssl_cls.return_value.__enter__.return_value
        mail.send_mail("user@example.com", "1234")
    assert plain_cls.call_count == 0
    assert ssl_cls.call_args.args == ("smtp.example.com", 465)
    assert server.starttls.call_count == 0
    assert server.send_message.call_count == 1
    sent = server.send_message.call_args.args[0]
    assert sent.get_content() == expected.get_content()
    assert "1234" in expected.get_content()


def test_send_error_propagates():
    with mock.patch("smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"denied")
        with pytest.raises(smtplib.SMTPAuthenticationError):
            _mail().send_mail("user@example.com", "5555")
    assert server.send_message.call_count == 0