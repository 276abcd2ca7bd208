"""Builder for sitemaps.org XML sitemaps."""

from sitemapgen.errors import SitemapError
from sitemapgen.notification import HttpTransport, HttpxTransport, NotificationFailure, Ping, PingResponse, SearchEngine
from sitemapgen.sitemap import (
    ChangeFreq,
    InvalidPriorityError,
    InvalidUrlError,
    PageEntry,
    SitemapGenerator,
    W3CDateFormat,
    W3CPattern,
)

__all__ = [
    "ChangeFreq",
    "HttpTransport",
    "HttpxTransport",
    "InvalidPriorityError",
    "InvalidUrlError",
    "NotificationFailure",
    "PageEntry",
    "Ping",
    "PingResponse",
    "SearchEngine",
    "SitemapError",
    "SitemapGenerator",
    "W3CDateFormat",
    "W3CPattern",
]
