"""Persisted push notification configuration.

One row per ``(task_id, config_id)``. The configuration body is stored as a
JSON string and is only interpreted through ``serialize_config`` / ``get_config``.
"""

from typing import ClassVar

from django.db import models

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from push_config.exceptions import PushNotificationConfigFormatError
from push_config.schemas import PushNotificationConfig


class PushNotificationConfigRecord(models.Model):
    """Push notification config registered for a task.

    The table's natural key is ``(task_id, config_id)``. Django models this
    with a unique constraint and an implicit id field.

    Attributes:
        task_id: Task the config belongs to.
        config_id: Config identifier, unique within the task.
        created_at: When the config was first stored (NULL for legacy rows).
        config_json: Serialized PushNotificationConfig.
    """

    task_id = models.CharField(
        max_length=255,
        help_text="Task the config belongs to",
    )
    config_id = models.CharField(
        max_length=255,
        help_text="Config identifier, unique within a task",
    )
    created_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the config was first stored",
    )
    config_json = models.TextField(
        help_text="Serialized push notification config",
    )

    class Meta:
        """Django model metadata."""

        db_table = "push_notification_configs"
        constraints: ClassVar[list] = [
            models.UniqueConstraint(
                fields=["task_id", "config_id"],
                name="uq_push_notification_configs_task_config",
            ),
        ]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["task_id", "-created_at", "config_id"],
                name="ix_push_configs_task_created",
            ),
        ]

    @staticmethod
    def serialize_config(config: PushNotificationConfig) -> str:
        """Serialize a config for storage.

        Raises:
            PushNotificationConfigFormatError: If the config cannot be encoded.
        """
        try:
            return config.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise PushNotificationConfigFormatError(
                f"Cannot serialize push notification config: {e}"
            ) from e

    def get_config(self) -> PushNotificationConfig:
        """Deserialize the stored config.

        Raises:
            PushNotificationConfigFormatError: If the payload is not a valid config.
        """
        try:
            return PushNotificationConfig.model_validate_json(self.config_json)
        except ValidationError as e:
            raise PushNotificationConfigFormatError(
                f"Cannot deserialize push notification config: {e}"
            ) from e

    def __str__(self) -> str:
        """Return string representation of the config record."""
        return f"push config {self.config_id} for task {self.task_id}"

    def __repr__(self) -> str:
        """Return detailed representation of the config record."""
        return (
            f"<PushNotificationConfigRecord(task_id={self.task_id}, "
            f"config_id={self.config_id}, "
            f"created_at={self.created_at})>"
        )
