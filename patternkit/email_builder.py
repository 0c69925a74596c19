"""Building and sending an e-mail through a builder handed to a callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class Email:
    """A simple e-mail message."""

    sender: str = ""
    recipient: str = ""
    subject: str = ""
    body: str = ""

    def __str__(self) -> str:
        return (
            f"Email sent to `{self.recipient}` by `{self.sender}` "
            f"with subject `{self.subject}` and body as `{self.body}`"
        )


class EmailBuilder:
    """Fluent builder that validates addresses as they are set."""

    def __init__(self) -> None:
        self._email = Email()

    @staticmethod
    def _check_address(address: str) -> None:
        if "@" not in address:
            raise ValueError("From should contain an @")

    def from_(self, address: str) -> EmailBuilder:
        self._check_address(address)
        self._email.sender = address
        return self

    def to(self, address: str) -> EmailBuilder:
        self._check_address(address)
        self._email.recipient = address
        return self

    def subject(self, subject: str) -> EmailBuilder:
        self._email.subject = subject
        return self

    def body(self, body: str) -> EmailBuilder:
        self._email.body = body
        return self

    @property
    def email(self) -> Email:
        return self._email


def send_mail(action: Callable[[EmailBuilder], object]) -> Email:
    """Let ``action`` fill in a fresh builder, then send the result.

    Raises ValueError if the builder rejected any of its input.
    """
    builder = EmailBuilder()
    action(builder)
    email = builder.email
    print(email)
    return email


def demo() -> None:
    """Send one valid and one invalid e-mail."""
    attempts = [
        lambda eb: eb.from_("alice@example.com")
        .to("bob@example.com")
        .subject("First email")
        .body("Hello, how are you?"),
        lambda eb: eb.from_("abcexample.com")
        .to("bob@example.com")
        .subject("First email")
        .body("Hello, how are you?"),
    ]
    for attempt in attempts:
        try:
            send_mail(attempt)
        except ValueError as err:
            print(f"Error sending email: {err}")