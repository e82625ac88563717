"""Push notification config schemas."""

from push_config.schemas.push_notification.list_task_push_notification_config_params import (
    ListTaskPushNotificationConfigParams,
)
from push_config.schemas.push_notification.list_task_push_notification_config_result import (
    ListTaskPushNotificationConfigResult,
)
from push_config.schemas.push_notification.push_notification_config import (
    PushNotificationAuthenticationInfo,
    PushNotificationConfig,
)
from push_config.schemas.push_notification.task_push_notification_config import (
    TaskPushNotificationConfig,
)

__all__ = [
    "ListTaskPushNotificationConfigParams",
    "ListTaskPushNotificationConfigResult",
    "PushNotificationAuthenticationInfo",
    "PushNotificationConfig",
    "TaskPushNotificationConfig",
]
