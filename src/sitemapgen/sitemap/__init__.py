from sitemapgen.sitemap.collection import PageCollection
from sitemapgen.sitemap.dates import W3CDateFormat, W3CPattern
from sitemapgen.sitemap.errors import InvalidPriorityError, InvalidUrlError
from sitemapgen.sitemap.generator import SitemapGenerator
from sitemapgen.sitemap.models import ChangeFreq, PageEntry, SitemapDefaults
from sitemapgen.sitemap.pretty import pretty_print
from sitemapgen.sitemap.urls import connect_url_parts, escape_xml_special_characters, get_absolute_url

__all__ = [
    "ChangeFreq",
    "InvalidPriorityError",
    "InvalidUrlError",
    "PageCollection",
    "PageEntry",
    "SitemapDefaults",
    "SitemapGenerator",
    "W3CDateFormat",
    "W3CPattern",
    "connect_url_parts",
    "escape_xml_special_characters",
    "get_absolute_url",
    "pretty_print",
]
