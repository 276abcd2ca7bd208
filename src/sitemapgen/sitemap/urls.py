"""URL joining, escaping and resolution for sitemap locations."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from .errors import InvalidUrlError

_XML_ESCAPES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)
_ILLEGAL_URL_CHARS = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}]')


def connect_url_parts(base: str, part: str) -> str:
    """Join two URL segments with exactly one slash between them."""
    if base.endswith("/"):
        base = base[:-1]
    if part.startswith("/"):
        part = part[1:]
    return f"{base}/{part}"


def _escape(value: str) -> str:
    for char, entity in _XML_ESCAPES:
        value = value.replace(char, entity)
    return value


def escape_xml_special_characters(value: str | None) -> str | None:
    if value is None:
        return None
    return _escape(value)


def is_absolute(value: str) -> bool:
    return bool(urlparse(value).scheme)


def validate_url(value: str) -> str:
    if _ILLEGAL_URL_CHARS.search(value):
        msg = f"Invalid URL: {value!r}"
        raise InvalidUrlError(msg)
    try:
        parsed = urlparse(value)
        hostname = parsed.hostname
    except ValueError as exc:
        msg = f"Invalid URL: {value!r}"
        raise InvalidUrlError(msg) from exc
    if not parsed.scheme or not parsed.netloc or not hostname:
        msg = f"Invalid URL: {value!r}"
        raise InvalidUrlError(msg)
    return value


def get_absolute_url(base_url: str, name: str | None, *, escape: bool = True) -> str:
    """Resolve a page name against the base URL.

    A missing name resolves to the base URL itself and an absolute name (for
    example an asset hosted on a CDN) is kept verbatim. Anything else is joined
    onto the base URL.

    Escaping must be disabled for URLs that are sent to search engines, since
    those are percent-encoded as query values instead.
    """
    if name is None:
        return validate_url(base_url)
    if escape:
        name = _escape(name)
    resolved = name if is_absolute(name) else connect_url_parts(base_url, name)
    return validate_url(resolved)
