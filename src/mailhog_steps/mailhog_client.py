"""MailHog API client for fetching captured messages."""

from __future__ import annotations

import json

from .constants import DEFAULT_MESSAGES_ENDPOINT
from .errors import EmptyInboxError, ProtocolError, TransportError
from .models import RawMessage
from .transport import FetchText, fetch_text


class MessageStoreClient:
    """Reads captured messages from the MailHog v2 messages endpoint.

    The endpoint is fixed at construction. Each call performs exactly one
    request and nothing is cached between calls, so the latest message always
    reflects MailHog's state at call time.
    """

    def __init__(self, endpoint: str | None = None, fetch: FetchText | None = None) -> None:
        self._endpoint = endpoint or DEFAULT_MESSAGES_ENDPOINT
        self._fetch = fetch or fetch_text

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def fetch_messages(self) -> list[RawMessage]:
        """Return every captured message in the order MailHog lists them."""
        body, error = self._fetch(self._endpoint)
        if error:
            raise TransportError(self._endpoint, error)

        try:
            payload = json.loads(body)
        except (TypeError, ValueError) as e:
            raise ProtocolError(self._endpoint) from e

        if not isinstance(payload, dict):
            raise ProtocolError(self._endpoint)

        items = payload.get("items")
        if items is None:
            items = []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise ProtocolError(self._endpoint)

        return [RawMessage(data=item) for item in items]

    def fetch_latest_message(self) -> RawMessage:
        """Return the most recent message (first in MailHog's list)."""
        messages = self.fetch_messages()
        if not messages:
            raise EmptyInboxError()
        return messages[0]
