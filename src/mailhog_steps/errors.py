"""Exceptions raised by MailHog Steps.

Every failure is terminal for the step that triggered it; the message is the
only diagnostic, so each one names the offending field, text or endpoint.
"""

from __future__ import annotations


class MailHogError(RuntimeError):
    """Base class for all MailHog step failures."""


class TransportError(MailHogError):
    """The messages endpoint could not be reached."""

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Problem connecting to MailHog messages endpoint {endpoint}: {reason}")


class ProtocolError(MailHogError):
    """The messages endpoint answered with something other than a message list."""

    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint
        super().__init__(f"Could not retrieve MailHog messages from API at {endpoint}")


class EmptyInboxError(MailHogError):
    def __init__(self) -> None:
        super().__init__("There are no messages in MailHog")


class InvalidFieldError(MailHogError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Email field '{field}' is not valid")


class MissingFieldError(MailHogError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Could not find email '{field}' field")


class ValueMismatchError(MailHogError):
    """An email field differs from the expected value."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Email field '{field}' does not match expected value '{expected}'. "
            f"Field is set to '{actual}'"
        )


class ContentNotFoundError(MailHogError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not find content in email message: '{text}'")


class LinkNotFoundError(MailHogError):
    def __init__(self, link_text: str) -> None:
        self.link_text = link_text
        super().__init__(f"Unable to find link matching '{link_text}' to follow in email")
