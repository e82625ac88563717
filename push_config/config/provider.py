"""String-valued configuration properties.

Properties use dotted names such as
``a2a.push-notification-config.max-page-size``. The Django-backed provider
looks them up in ``settings.A2A_CONFIG``, which ``settings.py`` fills from
environment variables.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from django.conf import settings

from push_config.exceptions import ConfigPropertyNotFoundError


class ConfigProvider(ABC):
    """Source of string configuration properties."""

    @abstractmethod
    def get_value(self, name: str) -> str:
        """Return the value of ``name``.

        Raises:
            ConfigPropertyNotFoundError: If the property is not defined.
        """


class DjangoSettingsConfigProvider(ConfigProvider):
    """Read properties from the ``A2A_CONFIG`` mapping in Django settings."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        """Initialize provider.

        Args:
            overrides: Properties that take precedence over settings.
        """
        self._overrides = dict(overrides or {})

    def get_value(self, name: str) -> str:
        if name in self._overrides:
            return self._overrides[name]
        values = getattr(settings, "A2A_CONFIG", None) or {}
        if name not in values:
            raise ConfigPropertyNotFoundError(name)
        return str(values[name])
