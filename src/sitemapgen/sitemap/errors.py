"""Sitemap-related errors."""

from __future__ import annotations

from sitemapgen.errors import SitemapError


class InvalidPriorityError(SitemapError, ValueError):
    """Raised when a priority is outside of the 0.0 - 1.0 range."""


class InvalidUrlError(SitemapError, ValueError):
    """Raised when a computed or supplied URL is not a valid absolute URL."""
