from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from sitemapgen.errors import SitemapError

if TYPE_CHECKING:
    from sitemapgen.notification.base import HttpTransport


class SearchEngine(StrEnum):
    GOOGLE = "google"
    BING = "bing"

    @property
    def pretty_name(self) -> str:
        return self.value.capitalize()

    @property
    def ping_endpoint(self) -> str:
        return _PING_ENDPOINTS[self]


_PING_ENDPOINTS = {
    SearchEngine.GOOGLE: "https://www.google.com/ping?sitemap=",
    SearchEngine.BING: "https://www.bing.com/ping?sitemap=",
}


class TransportError(SitemapError):
    """Raised by an HTTP transport when a request could not be completed."""


class NotificationFailure(SitemapError):
    """Raised when a search engine could not be informed about a sitemap."""

    def __init__(self, engine: SearchEngine, reason: str) -> None:
        self.engine = engine
        self.reason = reason
        super().__init__(f"{engine.pretty_name} could not be informed about new sitemap: {reason}")


@dataclass(frozen=True, slots=True)
class Ping:
    search_engines: tuple[SearchEngine, ...] = (SearchEngine.GOOGLE, SearchEngine.BING)
    sitemap_url: str | None = None
    throw_exception_on_failure: bool = True
    transport: HttpTransport | None = None

    def __post_init__(self) -> None:
        if not self.search_engines:
            msg = "search_engines must be non-empty"
            raise ValueError(msg)
        engines = tuple(SearchEngine(engine) for engine in self.search_engines)
        object.__setattr__(self, "search_engines", engines)


@dataclass(frozen=True, slots=True)
class PingResponse:
    error: bool
    exception: NotificationFailure | None = None

    @property
    def ok(self) -> bool:
        return not self.error
