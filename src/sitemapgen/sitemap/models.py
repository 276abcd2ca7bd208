from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from .errors import InvalidPriorityError
from .urls import connect_url_parts, get_absolute_url

if TYPE_CHECKING:
    from .dates import W3CDateFormat

MAX_PRIORITY = 1.0
MIN_PRIORITY = 0.0


class ChangeFreq(StrEnum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


def validate_priority(priority: float | None) -> float | None:
    if priority is None:
        return None
    if isinstance(priority, bool) or math.isnan(priority) or not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        msg = f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, got {priority!r}"
        raise InvalidPriorityError(msg)
    return float(priority)


def join_dirs(dir_names: tuple[str, ...]) -> str | None:
    if not dir_names:
        return None
    return "/".join(dir_names)


@dataclass(frozen=True, slots=True)
class PageEntry:
    """A single ``<url>`` of a sitemap.

    Entries are immutable; the ``with_*`` methods return modified copies so
    that they can be chained.
    """

    name: str | None = None
    dir: str | None = None
    extension: str | None = None
    priority: float | None = None
    change_freq: ChangeFreq | None = None
    last_mod: datetime | date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", validate_priority(self.priority))
        if self.change_freq is not None:
            object.__setattr__(self, "change_freq", ChangeFreq(self.change_freq))

    @classmethod
    def of(cls, name: str) -> PageEntry:
        return cls(name=name)

    @classmethod
    def root(cls) -> PageEntry:
        return cls()

    def with_priority(self, priority: float) -> PageEntry:
        return replace(self, priority=priority)

    def with_priority_max(self) -> PageEntry:
        return replace(self, priority=MAX_PRIORITY)

    def with_change_freq(self, change_freq: ChangeFreq | str) -> PageEntry:
        return replace(self, change_freq=ChangeFreq(change_freq))

    def with_last_mod(self, last_mod: datetime | date) -> PageEntry:
        return replace(self, last_mod=last_mod)

    def with_last_mod_now(self) -> PageEntry:
        return replace(self, last_mod=datetime.now(UTC))

    def with_dir(self, *dir_names: str) -> PageEntry:
        return replace(self, dir=join_dirs(dir_names))

    def with_extension(self, extension: str) -> PageEntry:
        return replace(self, extension=extension)

    def compute_name(self) -> str | None:
        """Return ``dir/name.extension`` built from whichever parts are set."""
        name = self.name
        if name is not None and self.extension is not None:
            name = f"{name}.{self.extension}"
        if self.dir is None:
            return name
        if name is None:
            return self.dir
        return connect_url_parts(self.dir, name)

    def render(self, date_format: W3CDateFormat, base_url: str) -> str:
        out = ["<url>\n", f"<loc>{get_absolute_url(base_url, self.compute_name())}</loc>\n"]
        if self.last_mod is not None:
            out.append(f"<lastmod>{date_format.format(self.last_mod)}</lastmod>\n")
        if self.change_freq is not None:
            out.append(f"<changefreq>{self.change_freq.value}</changefreq>\n")
        if self.priority is not None:
            out.append(f"<priority>{self.priority:.1f}</priority>\n")
        out.append("</url>\n")
        return "".join(out)


@dataclass(frozen=True, slots=True)
class SitemapDefaults:
    """Values inherited by entries that leave the matching field unset."""

    dir: str | None = None
    extension: str | None = None
    priority: float | None = None
    change_freq: ChangeFreq | None = None
    last_mod: datetime | date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", validate_priority(self.priority))
        if self.change_freq is not None:
            object.__setattr__(self, "change_freq", ChangeFreq(self.change_freq))

    def apply(self, entry: PageEntry) -> PageEntry:
        return replace(
            entry,
            dir=entry.dir if entry.dir is not None else self.dir,
            extension=entry.extension if entry.extension is not None else self.extension,
            priority=entry.priority if entry.priority is not None else self.priority,
            change_freq=entry.change_freq if entry.change_freq is not None else self.change_freq,
            last_mod=entry.last_mod if entry.last_mod is not None else self.last_mod,
        )
