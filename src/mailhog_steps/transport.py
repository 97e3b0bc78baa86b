"""HTTP collaborators: fetching the MailHog API and navigating to links."""

from __future__ import annotations

from typing import Callable, Protocol
from urllib.parse import urljoin

import requests

from .constants import FETCH_TIMEOUT, NAVIGATION_TIMEOUT

# fetch(url) -> (body, error). Must report failures instead of raising.
FetchText = Callable[[str], tuple[str, str | None]]


class Navigator(Protocol):
    def visit(self, url: str) -> None: ...


def fetch_text(url: str, timeout: float = FETCH_TIMEOUT) -> tuple[str, str | None]:
    """GET ``url`` and return its body text.

    Connection failures, timeouts and other transport problems are returned
    as the error string rather than raised. HTTP error statuses are not
    transport failures: their body is returned as-is.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        return ("", str(e))
    return (resp.text, None)


class SessionNavigator:
    """Navigator backed by a requests Session.

    Relative paths are resolved against ``base_url``; absolute URLs are
    requested as they are. The last response is kept for later steps.
    """

    def __init__(
        self,
        base_url: str = "",
        session: requests.Session | None = None,
        timeout: float = NAVIGATION_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.last_response: requests.Response | None = None

    def locate(self, url: str) -> str:
        if not self.base_url:
            return url
        return urljoin(self.base_url, url)

    def visit(self, url: str) -> None:
        self.last_response = self.session.get(self.locate(url), timeout=self.timeout)
