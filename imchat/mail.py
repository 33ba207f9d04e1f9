"""Sending verification codes by e-mail over SMTP."""

from __future__ import annotations

import smtplib
import ssl
from dataclasses import dataclass, field
from email.message import EmailMessage

_SSL_PORT = 465
_TIMEOUT = 10.0
_BODY = (
    "Your verification code is: {code}. This code is valid for 5 minutes "
    "and should not be shared with others"
)


@dataclass
class Mail:
    """Sends verification codes from one sender account through an SMTP server."""

    smtp_addr: str
    smtp_port: int
    sender_mail: str
    sender_authorization_code: str = field(repr=False)
    title: str

    def name(self) -> str:
        """Name of this delivery channel."""
        return "mail"

    def build_message(self, mail: str, verify_code: str) -> EmailMessage:
        """Return the HTML message carrying verify_code to the address mail."""
        message = EmailMessage()
        message["From"] = self.sender_mail
        message["To"] = mail
        message["Subject"] = self.title
        message.set_content(_BODY.format(code=verify_code), subtype="html")
        return message

    def _connect(self, context: ssl.SSLContext) -> smtplib.SMTP:
        if self.smtp_port == _SSL_PORT:
            return smtplib.SMTP_SSL(self.smtp_addr, self.smtp_port, timeout=_TIMEOUT, context=context)
        return smtplib.SMTP(self.smtp_addr, self.smtp_port, timeout=_TIMEOUT)

    def send_mail(self, mail: str, verify_code: str) -> None:
        """Send the verification code to mail; SMTP and socket errors propagate."""
        message = self.build_message(mail, verify_code)
        context = ssl.create_default_context()
        with self._connect(context) as server:
            server.ehlo()
            if self.smtp_port != _SSL_PORT and server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()
            if self.sender_mail and server.has_extn("auth"):
                server.login(self.sender_mail, self.sender_authorization_code)
            server.send_message(message)