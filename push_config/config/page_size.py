"""Maximum page size for listing a task's push notification configs."""

import structlog

from push_config.config.provider import ConfigProvider
from push_config.constants import DEFAULT_MAX_PAGE_SIZE, MAX_PAGE_SIZE_PROPERTY
from push_config.exceptions import ConfigPropertyNotFoundError

logger = structlog.get_logger(__name__)


def load_max_page_size(config_provider: ConfigProvider) -> int:
    """Read ``a2a.push-notification-config.max-page-size``.

    Falls back to the default (100) when the property is missing or is not
    a positive integer. A bad value only produces a warning.

    Args:
        config_provider: Source of configuration properties.

    Returns:
        The maximum page size, always >= 1.
    """
    try:
        raw_value = config_provider.get_value(MAX_PAGE_SIZE_PROPERTY)
        max_page_size = int(raw_value)
        if max_page_size <= 0:
            raise ValueError(f"{MAX_PAGE_SIZE_PROPERTY} must be positive")
    except (ConfigPropertyNotFoundError, TypeError, ValueError) as e:
        logger.warning(
            "max_page_size_config_invalid",
            property=MAX_PAGE_SIZE_PROPERTY,
            default=DEFAULT_MAX_PAGE_SIZE,
            error=str(e),
        )
        return DEFAULT_MAX_PAGE_SIZE
    return max_page_size
