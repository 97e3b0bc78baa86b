"""Assertions used by the step definitions."""

from __future__ import annotations

from .constants import VALID_FIELDS
from .errors import (
    ContentNotFoundError,
    InvalidFieldError,
    LinkNotFoundError,
    MissingFieldError,
    ValueMismatchError,
)
from .extractor import contains_text, find_link_by_text
from .models import EmailView
from .transport import Navigator


def assert_field(view: EmailView, field: str, expected: str) -> None:
    """Check that ``field`` (from, subject or to) equals ``expected`` exactly."""
    field = field.lower()
    if field not in VALID_FIELDS:
        raise InvalidFieldError(field)

    actual = view.get(field)
    if not actual:
        raise MissingFieldError(field)
    if actual != expected:
        raise ValueMismatchError(field, expected, actual)


def assert_contains(view: EmailView, text: str) -> None:
    if not contains_text(view, text):
        raise ContentNotFoundError(text)


def resolve_link(view: EmailView, link_text: str) -> str:
    url = find_link_by_text(view, link_text)
    if not url:
        raise LinkNotFoundError(link_text)
    return url


def follow_link(view: EmailView, link_text: str, navigator: Navigator) -> str:
    """Visit the first link labelled ``link_text`` and return its URL."""
    url = resolve_link(view, link_text)
    navigator.visit(url)
    return url
