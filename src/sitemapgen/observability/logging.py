"""structlog setup shared by the library and the CLI.

Events carry page URLs, sitemap URLs, ping URLs and failure reasons. Site
URLs may embed basic-auth credentials (staging hosts are a common case), so
user info is redacted from every string value, including sitemap URLs that
are percent-encoded inside a ping URL.
"""

from __future__ import annotations

import logging
import os
import re
from datetime import date
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping

LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_FORMAT_ENV = "LOG_FORMAT"
DEFAULT_LEVEL = logging.INFO
REDACTED = "***"

_USERINFO_PATTERN = re.compile(r"(?P<prefix>\b[a-z][a-z0-9+.-]*://)[^/\s@]+@", re.IGNORECASE)
_QUOTED_USERINFO_PATTERN = re.compile(r"(?P<prefix>%3A%2F%2F)(?:(?!%2F)[^/\s@&])+%40", re.IGNORECASE)
_CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x7f]")
_MAX_VALUE_LENGTH = 2000


def redact_credentials(text: str) -> str:
    text = _USERINFO_PATTERN.sub(rf"\g<prefix>{REDACTED}@", text)
    return _QUOTED_USERINFO_PATTERN.sub(rf"\g<prefix>{REDACTED}%40", text)


def _clean_text(text: str) -> str:
    text = redact_credentials(text)
    text = _CONTROL_CHARS_PATTERN.sub(lambda match: repr(match.group(0))[1:-1], text)
    if len(text) > _MAX_VALUE_LENGTH:
        return text[:_MAX_VALUE_LENGTH] + "..."
    return text


def normalize_value(value: object) -> object:
    if isinstance(value, str):
        return _clean_text(value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, PurePath):
        return _clean_text(str(value))
    if isinstance(value, dict):
        return {key: normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize_value(item) for item in value]
    return _clean_text(str(value))


def normalize_event(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    return {key: normalize_value(value) for key, value in event_dict.items()}


def resolve_level(name: str | None = None) -> int:
    """Map a level name to its number; unknown or missing names mean INFO."""
    if name is None:
        name = os.environ.get(LOG_LEVEL_ENV, "")
    return logging.getLevelNamesMapping().get(name.strip().upper(), DEFAULT_LEVEL)


def configure_logging(level: str | None = None) -> structlog.BoundLogger:
    """Configure structlog once per command run.

    ``level`` takes precedence over ``LOG_LEVEL``. ``LOG_FORMAT=console``
    switches from JSON lines to structlog's console renderer.
    """
    renderer: structlog.types.Processor
    if os.environ.get(LOG_FORMAT_ENV, "json").lower() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            normalize_event,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        # the CLI reconfigures per invocation; cached loggers would keep the old stream
        cache_logger_on_first_use=False,
    )
    return cast("structlog.BoundLogger", structlog.get_logger())


def bind_run_context(**values: object) -> None:
    """Attach ``values`` to every event of the current run, dropping older context."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str) -> structlog.BoundLogger:
    return cast("structlog.BoundLogger", structlog.get_logger(name))
