"""Repositories for push config database queries."""

from push_config.repositories.push_notification_config_repository import (
    PushNotificationConfigRepository,
)

__all__ = ["PushNotificationConfigRepository"]
