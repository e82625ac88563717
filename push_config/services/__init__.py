"""Services for the push config app."""

from push_config.services.database_push_notification_config_store import (
    DatabasePushNotificationConfigStore,
)
from push_config.services.in_memory_push_notification_config_store import (
    InMemoryPushNotificationConfigStore,
)
from push_config.services.push_notification_config_store import (
    PushNotificationConfigStore,
)
from push_config.services.store_factory import (
    get_push_notification_config_store,
    reset_push_notification_config_store,
)

__all__ = [
    "DatabasePushNotificationConfigStore",
    "InMemoryPushNotificationConfigStore",
    "PushNotificationConfigStore",
    "get_push_notification_config_store",
    "reset_push_notification_config_store",
]
