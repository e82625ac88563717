"""Schema for a push notification configuration payload."""

from pydantic import Field

from push_config.schemas.base_schema_model import BaseSchemaModel


class PushNotificationAuthenticationInfo(BaseSchemaModel):
    """Authentication details the agent uses when calling the push endpoint."""

    schemes: list[str] = Field(
        default_factory=list, description="Supported authentication schemes"
    )
    credentials: str | None = Field(
        default=None, description="Optional credentials for the schemes"
    )


class PushNotificationConfig(BaseSchemaModel):
    """Configuration for delivering task updates to a client webhook.

    Stored as an opaque JSON payload. ``id`` defaults to the task id when the
    client does not supply one.
    """

    url: str = Field(..., description="Webhook URL receiving task updates")
    id: str | None = Field(
        default=None, description="Config identifier, unique within a task"
    )
    token: str | None = Field(
        default=None, description="Token echoed back to the client for validation"
    )
    authentication: PushNotificationAuthenticationInfo | None = Field(
        default=None, description="Authentication for the webhook call"
    )
