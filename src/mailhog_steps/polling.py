"""Wait for MailHog to capture a message."""

from __future__ import annotations

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .constants import POLL_ATTEMPTS, POLL_MAX_WAIT, POLL_MIN_WAIT
from .errors import EmptyInboxError, TransportError
from .mailhog_client import MessageStoreClient
from .models import RawMessage


def wait_for_latest_message(
    client: MessageStoreClient,
    attempts: int = POLL_ATTEMPTS,
    min_wait: float = POLL_MIN_WAIT,
    max_wait: float = POLL_MAX_WAIT,
) -> RawMessage:
    """Poll until MailHog holds at least one message and return the latest.

    Only an empty inbox or an unreachable endpoint is retried; a malformed
    response fails straight away. The last error is re-raised once
    ``attempts`` is exhausted.
    """
    retrying = Retrying(
        retry=retry_if_exception_type((EmptyInboxError, TransportError)),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        stop=stop_after_attempt(attempts),
        reraise=True,
    )
    return retrying(client.fetch_latest_message)
