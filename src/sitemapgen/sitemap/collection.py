from __future__ import annotations

from typing import TYPE_CHECKING

from sitemapgen.observability import get_logger

from .models import PageEntry, SitemapDefaults
from .urls import get_absolute_url

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)


class PageCollection:
    """Insertion-ordered pages keyed by their final URL.

    Adding a page whose URL is already present replaces the stored entry but
    keeps its original position.
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url
        self._pages: dict[str, PageEntry] = {}

    def add(self, page: PageEntry | str, defaults: SitemapDefaults | None = None) -> PageEntry:
        entry = PageEntry.of(page) if isinstance(page, str) else page
        if defaults is not None:
            entry = defaults.apply(entry)
        url = get_absolute_url(self._base_url, entry.compute_name(), escape=False)
        replaced = url in self._pages
        self._pages[url] = entry
        logger.debug("page_added", url=url, replaced=replaced)
        return entry

    def get(self, url: str) -> PageEntry | None:
        return self._pages.get(url)

    def urls(self) -> list[str]:
        return list(self._pages)

    def __iter__(self) -> Iterator[PageEntry]:
        return iter(self._pages.values())

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, url: object) -> bool:
        return url in self._pages
