"""Schemas for the push config app."""

from push_config.schemas.push_notification import (
    ListTaskPushNotificationConfigParams,
    ListTaskPushNotificationConfigResult,
    PushNotificationAuthenticationInfo,
    PushNotificationConfig,
    TaskPushNotificationConfig,
)

__all__ = [
    "ListTaskPushNotificationConfigParams",
    "ListTaskPushNotificationConfigResult",
    "PushNotificationAuthenticationInfo",
    "PushNotificationConfig",
    "TaskPushNotificationConfig",
]
