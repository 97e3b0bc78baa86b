"""Extract normalized fields and links from a captured MailHog message."""

from __future__ import annotations

import quopri
import re
from typing import Any

from .constants import HTML_CONTENT_TYPE, HTML_PART_INDEX
from .models import EmailView, LinkCandidate, RawMessage

# Soft line breaks, escaped ("=\r\n" as four characters) and real
_SOFT_BREAK_RE = re.compile(r"=(?:\\r\\n|\r\n|\n)")
_ESCAPED_CRLF = "\\r\\n"
_BACKSLASH_RE = re.compile(r"\\(.?)", re.DOTALL)

_ANCHOR_RE = re.compile(r'<a\b[^>]*?\bhref="([^"]*)"[^>]*>(.*?)</a\s*>', re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")


def decode_html_body(raw: str) -> str:
    """Turn a MailHog part body into readable HTML.

    Soft breaks must go before quoted-printable decoding, otherwise the
    decoder joins lines in the wrong places.
    """
    text = _SOFT_BREAK_RE.sub("", raw)
    text = text.replace(_ESCAPED_CRLF, "\r\n")
    text = quopri.decodestring(text.encode("utf-8")).decode("utf-8", errors="replace")
    return _BACKSLASH_RE.sub(r"\1", text)


def _content_type(part: dict[str, Any]) -> str:
    values = (part.get("Headers") or {}).get("Content-Type") or []
    return values[0].strip().lower() if values else ""


def select_html_part(parts: list[dict[str, Any]], by_content_type: bool = False) -> dict[str, Any] | None:
    """Pick the MIME part holding the HTML body.

    MailHog lists the HTML alternative second, so position wins unless
    ``by_content_type`` asks for the first part declared as text/html.
    """
    if by_content_type:
        for part in parts:
            if _content_type(part).startswith(HTML_CONTENT_TYPE):
                return part

    if len(parts) > HTML_PART_INDEX:
        return parts[HTML_PART_INDEX]
    return None


def extract(msg: RawMessage, by_content_type: bool = False) -> EmailView:
    """Build an EmailView from a raw message. Missing headers become ""."""
    part = select_html_part(msg.parts, by_content_type=by_content_type)
    body = (part or {}).get("Body") or ""

    return EmailView(
        date=msg.header("Date"),
        from_=msg.header("From"),
        to=msg.header("To"),
        subject=msg.header("Subject"),
        html=decode_html_body(body),
    )


def contains_text(view: EmailView, text: str) -> bool:
    return text in view.html


def strip_tags(html: str) -> str:
    return _TAG_RE.sub("", html)


def find_links(html: str) -> list[LinkCandidate]:
    """Return every anchor in ``html`` in document order."""
    return [
        LinkCandidate(text=strip_tags(body), href=href)
        for href, body in _ANCHOR_RE.findall(html)
    ]


def find_link_by_text(view: EmailView, visible_text: str) -> str | None:
    """Return the href of the first anchor whose visible text is ``visible_text``.

    Anchors with an empty href are skipped, so a later link with the same text
    still resolves.
    """
    for link in find_links(view.html):
        if link.text == visible_text and link.href:
            return link.href
    return None
