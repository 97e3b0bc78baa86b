"""Shared fixtures for tests."""

from __future__ import annotations

import json

import pytest

from mailhog_steps.mailhog_client import MessageStoreClient
from mailhog_steps.models import EmailView, RawMessage

pytest_plugins = ["mailhog_steps.steps"]

WELCOME_HTML_BODY = (
    "<html><body>\r\n"
    "<p>Welcome to the shop, Caf=C3=A9 fans!</p>\r\n"
    "<p>Your order confirmed. Please click the link =\r\nbelow.</p>\r\n"
    '<a href=3D"https://shop.test/confirm?token=3Dabc">Confirm email</a>\r\n'
    '<a href=3D"/help"><b>Get help</b></a>\r\n'
    "</body></html>"
)


class FakeMailHog:
    """Stands in for the HTTP fetch capability."""

    def __init__(self, payload: object = None) -> None:
        self.payload = payload
        self.body: str | None = None  # Raw body, overrides payload
        self.error: str | None = None
        self.calls: list[str] = []

    def __call__(self, url: str) -> tuple[str, str | None]:
        self.calls.append(url)
        if self.error:
            return ("", self.error)
        if self.body is not None:
            return (self.body, None)
        return (json.dumps(self.payload), None)


class RecordingNavigator:
    def __init__(self) -> None:
        self.visited: list[str] = []

    def visit(self, url: str) -> None:
        self.visited.append(url)


@pytest.fixture
def welcome_message() -> dict:
    return {
        "ID": "msg_welcome@mailhog.example",
        "Content": {
            "Headers": {
                "Date": ["Mon, 19 Oct 2026 10:00:00 +0000"],
                "From": ["Shop <no-reply@shop.test>"],
                "To": ["alice@example.com"],
                "Subject": ["Welcome"],
            },
            "Body": "",
        },
        "MIME": {
            "Parts": [
                {
                    "Headers": {"Content-Type": ["text/plain; charset=UTF-8"]},
                    "Body": "Welcome to the shop (plain text)",
                },
                {
                    "Headers": {
                        "Content-Type": ["text/html; charset=UTF-8"],
                        "Content-Transfer-Encoding": ["quoted-printable"],
                    },
                    "Body": WELCOME_HTML_BODY,
                },
            ]
        },
    }


@pytest.fixture
def older_message() -> dict:
    return {
        "ID": "msg_older@mailhog.example",
        "Content": {
            "Headers": {
                "Date": ["Sun, 18 Oct 2026 09:00:00 +0000"],
                "From": ["Shop <no-reply@shop.test>"],
                "To": ["bob@example.com"],
                "Subject": ["Older"],
            },
        },
        "MIME": {
            "Parts": [
                {"Body": "plain"},
                {"Body": "<p>Older message</p>"},
            ]
        },
    }


@pytest.fixture
def mailhog_payload(welcome_message: dict, older_message: dict) -> dict:
    return {"total": 2, "count": 2, "start": 0, "items": [welcome_message, older_message]}


@pytest.fixture
def fake_mailhog(mailhog_payload: dict) -> FakeMailHog:
    return FakeMailHog(mailhog_payload)


@pytest.fixture
def mailhog_client(fake_mailhog: FakeMailHog) -> MessageStoreClient:
    return MessageStoreClient(endpoint="http://mailhog.test:8025/api/v2/messages", fetch=fake_mailhog)


@pytest.fixture
def mailhog_navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def welcome_raw(welcome_message: dict) -> RawMessage:
    return RawMessage(data=welcome_message)


@pytest.fixture
def welcome_view() -> EmailView:
    return EmailView(
        date="Mon, 19 Oct 2026 10:00:00 +0000",
        from_="Shop <no-reply@shop.test>",
        to="alice@example.com",
        subject="Welcome",
        html=(
            '<p>Your order confirmed.</p><a href="https://shop.test/confirm">Confirm email</a>'
            '<a href="https://shop.test/help">Get help</a>'
        ),
    )
