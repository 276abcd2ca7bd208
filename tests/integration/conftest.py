from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import pytest

from sitemapgen.notification import HttpxTransport

if TYPE_CHECKING:
    from pytest_httpserver import HTTPServer

UNREACHABLE_SERVER = "http://127.0.0.1:9"


class LocalEngineTransport:
    """Sends ping requests to a local server, keeping path and query."""

    def __init__(self, server_url: str) -> None:
        self._server_url = server_url.rstrip("/")
        self._inner = HttpxTransport(timeout=5.0)
        self.engine_hosts: list[str] = []

    def get(self, url: str) -> int:
        parts = urlsplit(url)
        self.engine_hosts.append(parts.netloc)
        return self._inner.get(f"{self._server_url}{parts.path}?{parts.query}")


@pytest.fixture
def local_transport(httpserver: HTTPServer) -> LocalEngineTransport:
    return LocalEngineTransport(httpserver.url_for("/"))


@pytest.fixture
def unreachable_transport() -> LocalEngineTransport:
    return LocalEngineTransport(UNREACHABLE_SERVER)
