from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitemapgen.notification import Ping, SearchEngine
from sitemapgen.sitemap import ChangeFreq, PageEntry, SitemapDefaults

if TYPE_CHECKING:
    from collections.abc import Mapping


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


class _PageFields(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    dir: str | None = None
    extension: str | None = None
    priority: float | None = Field(default=None, ge=0.0, le=1.0)
    change_freq: ChangeFreq | None = None
    last_mod: datetime | date | None = None


class DefaultsConfig(_PageFields):
    def to_defaults(self) -> SitemapDefaults:
        return SitemapDefaults(
            dir=self.dir,
            extension=self.extension,
            priority=self.priority,
            change_freq=self.change_freq,
            last_mod=self.last_mod,
        )


class PageConfig(_PageFields):
    name: str | None = None

    def to_entry(self) -> PageEntry:
        return PageEntry(
            name=self.name,
            dir=self.dir,
            extension=self.extension,
            priority=self.priority,
            change_freq=self.change_freq,
            last_mod=self.last_mod,
        )


class OutputConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path = Path("sitemap.xml")
    gzip: bool = False
    pretty_indent: int | None = Field(default=None, ge=0)


class PingConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    search_engines: list[SearchEngine] = Field(default_factory=lambda: list(SearchEngine))
    sitemap_url: str | None = None
    throw_exception_on_failure: bool = True
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("search_engines")
    @classmethod
    def _validate_search_engines(cls, value: list[SearchEngine]) -> list[SearchEngine]:
        if not value:
            msg = "must be non-empty"
            raise ValueError(msg)
        return value

    def to_ping(self, sitemap_url: str | None = None) -> Ping:
        return Ping(
            search_engines=tuple(self.search_engines),
            sitemap_url=sitemap_url or self.sitemap_url,
            throw_exception_on_failure=self.throw_exception_on_failure,
        )


class SiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str
    defaults: DefaultsConfig = DefaultsConfig()
    pages: list[PageConfig]
    output: OutputConfig = OutputConfig()
    ping: PingConfig | None = None

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        if not _is_valid_url(value):
            msg = "must be a valid URL"
            raise ValueError(msg)
        return value

    @field_validator("pages")
    @classmethod
    def _validate_pages(cls, value: list[PageConfig]) -> list[PageConfig]:
        if not value:
            msg = "must be non-empty"
            raise ValueError(msg)
        return value

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> SiteConfig:
        return cls.model_validate(data)
