"""Selection of the process-wide push notification config store."""

from functools import lru_cache

import structlog
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from push_config.constants import STORE_BACKEND_DATABASE, STORE_BACKEND_MEMORY
from push_config.services.database_push_notification_config_store import (
    DatabasePushNotificationConfigStore,
)
from push_config.services.in_memory_push_notification_config_store import (
    InMemoryPushNotificationConfigStore,
)
from push_config.services.push_notification_config_store import (
    PushNotificationConfigStore,
)

logger = structlog.get_logger(__name__)

_STORE_CLASSES: dict[str, type[PushNotificationConfigStore]] = {
    STORE_BACKEND_DATABASE: DatabasePushNotificationConfigStore,
    STORE_BACKEND_MEMORY: InMemoryPushNotificationConfigStore,
}


@lru_cache(maxsize=1)
def get_push_notification_config_store() -> PushNotificationConfigStore:
    """Return the store named by ``settings.PUSH_NOTIFICATION_CONFIG_STORE``.

    Built once per process.

    Raises:
        ImproperlyConfigured: If the setting names an unknown store.
    """
    backend = getattr(settings, "PUSH_NOTIFICATION_CONFIG_STORE", STORE_BACKEND_DATABASE)
    store_class = _STORE_CLASSES.get(backend)
    if store_class is None:
        raise ImproperlyConfigured(
            f"Unknown PUSH_NOTIFICATION_CONFIG_STORE '{backend}'; "
            f"expected one of: {', '.join(sorted(_STORE_CLASSES))}"
        )
    logger.info("push_config_store_selected", backend=backend)
    return store_class()


def reset_push_notification_config_store() -> None:
    """Drop the cached store so the next call rebuilds it from settings."""
    get_push_notification_config_store.cache_clear()
