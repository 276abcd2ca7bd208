from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING
from urllib.parse import quote

from sitemapgen.notification.models import NotificationFailure, PingResponse, SearchEngine
from sitemapgen.observability import get_logger

if TYPE_CHECKING:
    from sitemapgen.notification.base import HttpTransport
    from sitemapgen.notification.models import Ping

logger = get_logger(__name__)


def build_ping_url(engine: SearchEngine, sitemap_url: str) -> str:
    return engine.ping_endpoint + quote(sitemap_url, safe="")


class SearchEngineNotifier:
    """Tells search engines that a sitemap has changed.

    Engines are contacted in order, once each. The first engine that answers
    with anything but 200, or whose request fails, ends the call: later engines
    are not contacted. Depending on ``Ping.throw_exception_on_failure`` the
    failure is raised as ``NotificationFailure`` or returned in the response.
    """

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    def notify(self, ping: Ping, sitemap_url: str) -> PingResponse:
        transport = ping.transport or self._transport
        for engine in ping.search_engines:
            try:
                self._ping_engine(transport, engine, sitemap_url)
            except NotificationFailure as failure:
                logger.warning("ping_failed", engine=engine.value, sitemap_url=sitemap_url, reason=failure.reason)
                if ping.throw_exception_on_failure:
                    raise
                return PingResponse(error=True, exception=failure)
            logger.info("ping_succeeded", engine=engine.value, sitemap_url=sitemap_url)
        return PingResponse(error=False)

    @staticmethod
    def _ping_engine(transport: HttpTransport, engine: SearchEngine, sitemap_url: str) -> None:
        url = build_ping_url(engine, sitemap_url)
        try:
            status_code = transport.get(url)
        except Exception as exc:
            raise NotificationFailure(engine, str(exc)) from exc
        if status_code != HTTPStatus.OK:
            msg = f"return code {status_code} != {HTTPStatus.OK.value}"
            raise NotificationFailure(engine, msg)
