from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .errors import ConfigError
from .models import SiteConfig

if TYPE_CHECKING:
    from pathlib import Path

BASE_URL_ENV = "SITEMAP_BASE_URL"


def load_config(path: Path) -> SiteConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"config not found: {path}"
        raise ConfigError(msg) from exc
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc

    base_url = os.environ.get(BASE_URL_ENV)
    if base_url:
        data["base_url"] = base_url

    try:
        return SiteConfig.from_raw(data)
    except ValidationError as exc:
        msg = f"invalid config: {path}"
        raise ConfigError(msg) from exc
