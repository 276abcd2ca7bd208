from .errors import ConfigError
from .loader import load_config
from .models import DefaultsConfig, OutputConfig, PageConfig, PingConfig, SiteConfig

__all__ = [
    "ConfigError",
    "DefaultsConfig",
    "OutputConfig",
    "PageConfig",
    "PingConfig",
    "SiteConfig",
    "load_config",
]
