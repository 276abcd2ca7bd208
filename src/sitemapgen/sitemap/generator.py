from __future__ import annotations

import gzip
import os
from dataclasses import replace
from datetime import UTC, date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Self

from sitemapgen.notification import HttpxTransport, Ping, SearchEngineNotifier
from sitemapgen.observability import get_logger

from .collection import PageCollection
from .dates import W3CDateFormat
from .models import MAX_PRIORITY, ChangeFreq, PageEntry, SitemapDefaults, join_dirs, validate_priority
from .pretty import pretty_print
from .urls import get_absolute_url, validate_url

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from sitemapgen.notification import HttpTransport, PingResponse

logger = get_logger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_SITEMAP_NAME = "sitemap.xml"


class SitemapGenerator:
    """Builds a sitemap for the pages of one site.

    Defaults set on the generator are copied onto pages as they are added and
    are never applied to pages added earlier. Setters return the generator so
    calls can be chained.

    Instances are not thread-safe; concurrent ``add_page`` calls need external
    synchronization.
    """

    def __init__(
        self,
        base_url: str,
        *,
        date_format: W3CDateFormat | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        self._base_url = validate_url(base_url)
        self._date_format = date_format or W3CDateFormat()
        self._transport = transport
        self._defaults = SitemapDefaults()
        self._pages = PageCollection(self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def defaults(self) -> SitemapDefaults:
        return self._defaults

    @property
    def pages(self) -> PageCollection:
        return self._pages

    def add_page(self, page: PageEntry | str) -> Self:
        self._pages.add(page, self._defaults)
        return self

    def add_pages(self, items: Iterable[object], mapper: Callable[[object], PageEntry | str] | None = None) -> Self:
        for item in items:
            page = mapper(item) if mapper is not None else item
            if not isinstance(page, (PageEntry, str)):
                msg = f"expected PageEntry or str, got {type(page).__name__}"
                raise TypeError(msg)
            self.add_page(page)
        return self

    def use_defaults(self, defaults: SitemapDefaults) -> Self:
        """Replace every default at once; pages added earlier keep their values."""
        self._defaults = defaults
        return self

    def default_dir(self, *dir_names: str) -> Self:
        self._defaults = replace(self._defaults, dir=join_dirs(dir_names))
        return self

    def reset_default_dir(self) -> Self:
        self._defaults = replace(self._defaults, dir=None)
        return self

    def default_extension(self, extension: str) -> Self:
        self._defaults = replace(self._defaults, extension=extension)
        return self

    def reset_default_extension(self) -> Self:
        self._defaults = replace(self._defaults, extension=None)
        return self

    def default_priority(self, priority: float) -> Self:
        self._defaults = replace(self._defaults, priority=validate_priority(priority))
        return self

    def default_priority_max(self) -> Self:
        return self.default_priority(MAX_PRIORITY)

    def reset_default_priority(self) -> Self:
        self._defaults = replace(self._defaults, priority=None)
        return self

    def default_change_freq(self, change_freq: ChangeFreq | str) -> Self:
        self._defaults = replace(self._defaults, change_freq=ChangeFreq(change_freq))
        return self

    def reset_default_change_freq(self) -> Self:
        self._defaults = replace(self._defaults, change_freq=None)
        return self

    def default_last_mod(self, last_mod: datetime | date) -> Self:
        self._defaults = replace(self._defaults, last_mod=last_mod)
        return self

    def default_last_mod_now(self) -> Self:
        return self.default_last_mod(datetime.now(UTC))

    def reset_default_last_mod(self) -> Self:
        self._defaults = replace(self._defaults, last_mod=None)
        return self

    def to_string_array(self) -> list[str]:
        out = [XML_DECLARATION, f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n']
        out.extend(page.render(self._date_format, self._base_url) for page in self._pages)
        out.append("</urlset>")
        return out

    def to_string(self) -> str:
        return "".join(self.to_string_array())

    def __str__(self) -> str:
        return self.to_string()

    def to_pretty_string(self, indent: int) -> str:
        return pretty_print(self.to_string(), indent).replace("\r\n", "\n")

    def to_gzip_bytes(self) -> bytes:
        return gzip.compress(self.to_string().encode("utf-8"), mtime=0)

    def to_file(self, path: str | os.PathLike[str], *, pretty_indent: int | None = None) -> Path:
        target = _prepare_target(Path(path))
        with target.open("w", encoding="utf-8", newline="") as fh:
            if pretty_indent is None:
                fh.writelines(self.to_string_array())
            else:
                fh.write(self.to_pretty_string(pretty_indent))
        logger.info("sitemap_written", path=str(target), pages=len(self._pages), compressed=False)
        return target

    def to_gzip_file(self, path: str | os.PathLike[str]) -> Path:
        target = _prepare_target(Path(path))
        target.write_bytes(self.to_gzip_bytes())
        logger.info("sitemap_written", path=str(target), pages=len(self._pages), compressed=True)
        return target

    def sitemap_url(self, sitemap_url: str | None = None) -> str:
        return get_absolute_url(self._base_url, sitemap_url or DEFAULT_SITEMAP_NAME, escape=False)

    def ping(self, ping: Ping | None = None) -> PingResponse:
        """Notify search engines about the published sitemap.

        The sitemap is expected at ``base_url/sitemap.xml`` unless
        ``ping.sitemap_url`` says otherwise; relative URLs are resolved against
        the base URL.
        """
        ping = ping or Ping()
        notifier = SearchEngineNotifier(self._transport or HttpxTransport())
        return notifier.notify(ping, self.sitemap_url(ping.sitemap_url))


def _prepare_target(path: Path) -> Path:
    if path.exists():
        if path.is_dir():
            msg = f"File '{path}' exists but is a directory"
            raise IsADirectoryError(msg)
        if not os.access(path, os.W_OK):
            msg = f"File '{path}' cannot be written to"
            raise PermissionError(msg)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
    return path
