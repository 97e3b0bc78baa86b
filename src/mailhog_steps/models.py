"""Data models for MailHog Steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawMessage:
    """One message exactly as returned by the MailHog v2 messages API."""

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def headers(self) -> dict[str, list[str]]:
        content = self.data.get("Content") or {}
        return content.get("Headers") or {}

    def header(self, name: str) -> str:
        """Return the first value of header ``name`` or "" when it is missing."""
        values = self.headers.get(name) or []
        return values[0] if values else ""

    @property
    def parts(self) -> list[dict[str, Any]]:
        # MIME is null for messages that are not multipart
        mime = self.data.get("MIME") or {}
        return mime.get("Parts") or []


@dataclass(frozen=True)
class EmailView:
    """Normalized fields of a captured email."""

    date: str = ""
    from_: str = ""  # "from" is a keyword
    to: str = ""
    subject: str = ""
    html: str = ""  # Decoded HTML body

    def get(self, name: str) -> str:
        """Return a field by its public name ("from", "to", "subject", ...)."""
        attr = "from_" if name == "from" else name
        return getattr(self, attr)


@dataclass(frozen=True)
class LinkCandidate:
    """An anchor found in an HTML body."""

    text: str  # Visible text with tags stripped
    href: str
