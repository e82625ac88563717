"""Exceptions raised by the push notification config store."""

from push_config.exceptions.store_exceptions import (
    ConfigPropertyNotFoundError,
    InvalidParamsError,
    PushConfigError,
    PushNotificationConfigFormatError,
    PushNotificationConfigStoreError,
)

__all__ = [
    "ConfigPropertyNotFoundError",
    "InvalidParamsError",
    "PushConfigError",
    "PushNotificationConfigFormatError",
    "PushNotificationConfigStoreError",
]
