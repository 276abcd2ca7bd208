from __future__ import annotations


class SitemapError(Exception):
    """Base class for errors raised by sitemapgen."""
