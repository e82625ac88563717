"""Interface for storing push notification configurations."""

from abc import ABC, abstractmethod

from push_config.schemas import (
    ListTaskPushNotificationConfigParams,
    ListTaskPushNotificationConfigResult,
    PushNotificationConfig,
)


class PushNotificationConfigStore(ABC):
    """Interface for storing and retrieving push notification configurations for tasks."""

    @abstractmethod
    def set_info(
        self, task_id: str, notification_config: PushNotificationConfig
    ) -> PushNotificationConfig:
        """Sets or updates a push notification configuration for a task.

        A config without an id is stored under the task id. Returns the
        config as stored.
        """

    @abstractmethod
    def get_info(
        self, params: ListTaskPushNotificationConfigParams
    ) -> ListTaskPushNotificationConfigResult:
        """Retrieves one page of push notification configurations for a task."""

    @abstractmethod
    def delete_info(self, task_id: str, config_id: str | None = None) -> None:
        """Deletes a push notification configuration; missing configs are ignored."""
