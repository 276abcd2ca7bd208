"""W3C datetime formatting for <lastmod> values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import tzinfo


class W3CPattern(StrEnum):
    DAY = "%Y-%m-%d"
    MINUTES = "%Y-%m-%dT%H:%M"
    SECONDS = "%Y-%m-%dT%H:%M:%S"
    MILLISECONDS = "%Y-%m-%dT%H:%M:%S.%f"


def format_offset(offset: timedelta | None) -> str:
    if not offset:
        return "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True, slots=True)
class W3CDateFormat:
    """Formats dates using the W3C datetime profile required by sitemaps.

    Aware datetimes keep their own offset unless ``timezone`` is set, in which
    case they are converted to it. Naive datetimes and plain dates are taken to
    be in ``timezone`` (UTC when unset).
    """

    pattern: W3CPattern = W3CPattern.SECONDS
    timezone: tzinfo | None = None

    def format(self, value: datetime | date) -> str:
        moment = self._to_datetime(value)
        if self.pattern is W3CPattern.DAY:
            return moment.strftime(self.pattern)
        text = moment.strftime(self.pattern)
        if self.pattern is W3CPattern.MILLISECONDS:
            # %f renders microseconds
            text = text[:-3]
        return text + format_offset(moment.utcoffset())

    def _to_datetime(self, value: datetime | date) -> datetime:
        zone = self.timezone or UTC
        if not isinstance(value, datetime):
            return datetime.combine(value, time(), tzinfo=zone)
        if value.tzinfo is None:
            return value.replace(tzinfo=zone)
        if self.timezone is not None:
            return value.astimezone(self.timezone)
        return value
