"""Repository for push notification config database queries."""

from django.db.models import QuerySet

from push_config.identity import TaskConfigKey
from push_config.models import PushNotificationConfigRecord
from push_config.pagination import (
    PageCursor,
    build_keyset_queryset,
    current_timestamp,
)


class PushNotificationConfigRepository:
    """Repository for encapsulating push notification config queries.

    Callers are expected to wrap these calls in a transaction; the
    repository itself does not open one.
    """

    @staticmethod
    def get_by_key(key: TaskConfigKey) -> PushNotificationConfigRecord | None:
        """Look up one config by its composite key.

        Args:
            key: Task and config id of the record

        Returns:
            The record, or None if it does not exist
        """
        return PushNotificationConfigRecord.objects.filter(
            task_id=key.task_id, config_id=key.config_id
        ).first()

    @staticmethod
    def upsert(
        key: TaskConfigKey, config_json: str
    ) -> tuple[PushNotificationConfigRecord, bool]:
        """Insert or update the payload stored under ``key``.

        An existing record keeps its ``created_at``; a new record gets the
        current time.

        Args:
            key: Task and config id of the record
            config_json: Serialized config payload

        Returns:
            Tuple of (record, created)
        """
        return PushNotificationConfigRecord.objects.update_or_create(
            task_id=key.task_id,
            config_id=key.config_id,
            defaults={"config_json": config_json},
            create_defaults={
                "config_json": config_json,
                "created_at": current_timestamp(),
            },
        )

    @staticmethod
    def get_page(
        task_id: str, cursor: PageCursor | None, limit: int
    ) -> QuerySet[PushNotificationConfigRecord]:
        """Fetch up to ``limit`` configs of a task after ``cursor``.

        Args:
            task_id: Task whose configs are listed
            cursor: Position after which to start, None for the first page
            limit: Maximum number of rows

        Returns:
            QuerySet in keyset order (newest first, config id ascending)

        Example:
            >>> rows = PushNotificationConfigRepository.get_page("t1", None, 3)
            >>> [row.config_id for row in rows]
            ['c', 'b', 'a']
        """
        queryset = PushNotificationConfigRecord.objects.filter(task_id=task_id)
        return build_keyset_queryset(queryset, cursor, limit)
