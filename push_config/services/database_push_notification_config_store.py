"""Push notification config store backed by the Django ORM.

Every operation runs in a single ``transaction.atomic()`` block, so a
failure (storage or payload serialization) leaves nothing half-written.
Listing uses keyset pagination; see ``push_config.pagination``.
"""

import structlog
from django.db import transaction

from push_config.config import (
    ConfigProvider,
    DjangoSettingsConfigProvider,
    load_max_page_size,
)
from push_config.exceptions import (
    InvalidParamsError,
    PushNotificationConfigFormatError,
    PushNotificationConfigStoreError,
)
from push_config.identity import TaskConfigKey, with_default_config_id
from push_config.models import PushNotificationConfigRecord
from push_config.pagination import decode_page_token, encode_page_token
from push_config.repositories import PushNotificationConfigRepository
from push_config.schemas import (
    ListTaskPushNotificationConfigParams,
    ListTaskPushNotificationConfigResult,
    PushNotificationConfig,
    TaskPushNotificationConfig,
)
from push_config.services.push_notification_config_store import (
    PushNotificationConfigStore,
)

logger = structlog.get_logger(__name__)


class DatabasePushNotificationConfigStore(PushNotificationConfigStore):
    """Persist push notification configs in the relational database."""

    def __init__(self, config_provider: ConfigProvider | None = None) -> None:
        """Initialize the store.

        The maximum page size is read once here.

        Args:
            config_provider: Source of configuration properties. Defaults to
                Django settings.
        """
        self.repository = PushNotificationConfigRepository()
        self.max_page_size = load_max_page_size(
            config_provider or DjangoSettingsConfigProvider()
        )

    @transaction.atomic
    def set_info(
        self, task_id: str, notification_config: PushNotificationConfig
    ) -> PushNotificationConfig:
        """Insert or update a task's push notification config.

        Args:
            task_id: Task the config belongs to.
            notification_config: Config to store; a missing id defaults to task_id.

        Returns:
            The config as stored.

        Raises:
            PushNotificationConfigStoreError: If the config cannot be serialized.
        """
        notification_config = with_default_config_id(task_id, notification_config)
        key = TaskConfigKey(task_id=task_id, config_id=notification_config.id)

        logger.debug(
            "push_config_saving", task_id=task_id, config_id=key.config_id
        )
        try:
            config_json = PushNotificationConfigRecord.serialize_config(
                notification_config
            )
        except PushNotificationConfigFormatError as e:
            logger.error(
                "push_config_serialization_failed",
                task_id=task_id,
                config_id=key.config_id,
                error=str(e),
            )
            raise PushNotificationConfigStoreError(
                f"Failed to serialize PushNotificationConfig for Task "
                f"'{task_id}' with ID: {key.config_id}",
                task_id=task_id,
                config_id=key.config_id,
            ) from e

        _, created = self.repository.upsert(key, config_json)
        logger.debug(
            "push_config_persisted" if created else "push_config_updated",
            task_id=task_id,
            config_id=key.config_id,
        )
        return notification_config

    @transaction.atomic
    def get_info(
        self, params: ListTaskPushNotificationConfigParams
    ) -> ListTaskPushNotificationConfigResult:
        """List one page of a task's push notification configs.

        Args:
            params: Task id, page size, page token and tenant.

        Returns:
            Configs newest first, with the token of the next page (None on
            the last page).

        Raises:
            InvalidParamsError: If the page token is malformed.
            PushNotificationConfigStoreError: If a stored config cannot be read.
        """
        task_id = params.id
        logger.debug(
            "push_configs_retrieving",
            task_id=task_id,
            page_size=params.page_size,
            page_token=params.page_token,
        )
        try:
            return self._get_page(params)
        except InvalidParamsError as e:
            logger.warning(
                "push_configs_invalid_params", task_id=task_id, error=e.message
            )
            raise
        except Exception:
            logger.exception("push_configs_retrieval_failed", task_id=task_id)
            raise

    def _get_page(
        self, params: ListTaskPushNotificationConfigParams
    ) -> ListTaskPushNotificationConfigResult:
        task_id = params.id
        cursor = decode_page_token(params.page_token)
        page_size = params.get_effective_page_size(self.max_page_size)

        rows = list(self.repository.get_page(task_id, cursor, page_size + 1))

        next_page_token = None
        if len(rows) > page_size:
            rows = rows[:page_size]
            last_row = rows[-1]
            next_page_token = encode_page_token(last_row.created_at, last_row.config_id)

        configs = [self._read_config(task_id, row) for row in rows]
        logger.debug(
            "push_configs_retrieved", task_id=task_id, count=len(configs)
        )

        return ListTaskPushNotificationConfigResult(
            configs=[
                TaskPushNotificationConfig(
                    task_id=task_id,
                    push_notification_config=config,
                    tenant=params.tenant,
                )
                for config in configs
            ],
            next_page_token=next_page_token,
        )

    @staticmethod
    def _read_config(
        task_id: str, row: PushNotificationConfigRecord
    ) -> PushNotificationConfig:
        try:
            return row.get_config()
        except PushNotificationConfigFormatError as e:
            logger.error(
                "push_config_deserialization_failed",
                task_id=task_id,
                config_id=row.config_id,
                error=str(e),
            )
            raise PushNotificationConfigStoreError(
                f"Failed to deserialize PushNotificationConfig for Task "
                f"'{task_id}' with ID: {row.config_id}",
                task_id=task_id,
                config_id=row.config_id,
            ) from e

    @transaction.atomic
    def delete_info(self, task_id: str, config_id: str | None = None) -> None:
        """Delete a task's push notification config if it exists.

        Args:
            task_id: Task the config belongs to.
            config_id: Config to delete; defaults to task_id.
        """
        key = TaskConfigKey.resolve(task_id, config_id)
        logger.debug(
            "push_config_deleting", task_id=task_id, config_id=key.config_id
        )

        record = self.repository.get_by_key(key)
        if record is None:
            logger.debug(
                "push_config_not_found_for_deletion",
                task_id=task_id,
                config_id=key.config_id,
            )
            return

        record.delete()
        logger.debug(
            "push_config_deleted", task_id=task_id, config_id=key.config_id
        )
