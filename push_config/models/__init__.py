"""Database models for the push config app."""

from push_config.models.push_notification_config import PushNotificationConfigRecord

__all__ = ["PushNotificationConfigRecord"]
