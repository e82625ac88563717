"""Configuration access for the push config store."""

from push_config.config.page_size import load_max_page_size
from push_config.config.provider import ConfigProvider, DjangoSettingsConfigProvider

__all__ = [
    "ConfigProvider",
    "DjangoSettingsConfigProvider",
    "load_max_page_size",
]
