from sitemapgen.notification.base import HttpTransport
from sitemapgen.notification.models import NotificationFailure, Ping, PingResponse, SearchEngine, TransportError
from sitemapgen.notification.ping import SearchEngineNotifier, build_ping_url
from sitemapgen.notification.transport import HttpxTransport

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "NotificationFailure",
    "Ping",
    "PingResponse",
    "SearchEngine",
    "SearchEngineNotifier",
    "TransportError",
    "build_ping_url",
]
