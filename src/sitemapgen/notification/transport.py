from __future__ import annotations

import httpx

from sitemapgen.notification.models import TransportError

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpxTransport:
    def __init__(self, client: httpx.Client | None = None, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._client = client
        self._timeout = timeout

    def get(self, url: str) -> int:
        try:
            if self._client is not None:
                return self._client.get(url).status_code
            with httpx.Client(timeout=httpx.Timeout(self._timeout)) as client:
                return client.get(url).status_code
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            msg = f"GET {url} failed: {exc}"
            raise TransportError(msg) from exc
