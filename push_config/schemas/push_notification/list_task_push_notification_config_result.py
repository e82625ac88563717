"""Schema for one page of a task's push notification configs."""

from pydantic import Field

from push_config.schemas.base_schema_model import BaseSchemaModel
from push_config.schemas.push_notification.task_push_notification_config import (
    TaskPushNotificationConfig,
)


class ListTaskPushNotificationConfigResult(BaseSchemaModel):
    """Page of configs, most recently created first.

    ``next_page_token`` is None on the last page.
    """

    configs: list[TaskPushNotificationConfig] = Field(
        default_factory=list, description="Configs on this page"
    )
    next_page_token: str | None = Field(
        default=None, description="Token for the next page, None when exhausted"
    )
