"""Interface of services that deliver verification codes by text message."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SMS(ABC):
    """A text message provider able to send a verification code."""

    @abstractmethod
    def name(self) -> str:
        """Name of the provider."""

    @abstractmethod
    def send_code(self, area_code: str, phone_number: str, verify_code: str) -> None:
        """Send verify_code to the phone number; raise on delivery failure."""

    def __str__(self) -> str:
        return self.name()