"""Custom exceptions for push notification config storage."""

from push_config.constants import INTERNAL_ERROR_CODE, INVALID_PARAMS_ERROR_CODE


class PushConfigError(Exception):
    """Base exception for push notification config store errors."""

    def __init__(self, message: str, code: int | None = None):
        """Initialize push config error.

        Args:
            message: Error message
            code: JSON-RPC error code if applicable
        """
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidParamsError(PushConfigError):
    """Request parameters are malformed (client error, never retried)."""

    def __init__(self, message: str):
        """Initialize invalid params error.

        Args:
            message: Description of the invalid parameter
        """
        super().__init__(message=message, code=INVALID_PARAMS_ERROR_CODE)


class PushNotificationConfigFormatError(PushConfigError):
    """Config payload could not be serialized or deserialized."""

    def __init__(self, message: str):
        """Initialize format error.

        Args:
            message: Description of the format problem
        """
        super().__init__(message=message)


class PushNotificationConfigStoreError(PushConfigError):
    """Internal store failure for one task config (e.g. unreadable payload)."""

    def __init__(self, message: str, task_id: str, config_id: str | None = None):
        """Initialize store error.

        Args:
            message: Error message
            task_id: Task whose config failed
            config_id: Config that failed, if known
        """
        self.task_id = task_id
        self.config_id = config_id
        super().__init__(message=message, code=INTERNAL_ERROR_CODE)


class ConfigPropertyNotFoundError(PushConfigError):
    """Configuration property is not defined."""

    def __init__(self, name: str):
        """Initialize missing property error.

        Args:
            name: Name of the property that was requested
        """
        self.name = name
        super().__init__(message=f"Configuration property '{name}' is not set")
