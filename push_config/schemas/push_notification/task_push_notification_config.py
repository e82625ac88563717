"""Schema pairing a push notification config with its task."""

from pydantic import Field

from push_config.schemas.base_schema_model import BaseSchemaModel
from push_config.schemas.push_notification.push_notification_config import (
    PushNotificationConfig,
)


class TaskPushNotificationConfig(BaseSchemaModel):
    """A push notification config as listed for one task and tenant."""

    task_id: str = Field(..., description="Task the config belongs to")
    push_notification_config: PushNotificationConfig = Field(
        ..., description="The stored configuration"
    )
    tenant: str = Field(default="", description="Tenant the request was made for")
