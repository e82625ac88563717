"""Non-persistent push notification config store.

Keeps configs in process memory with the same id defaulting, ordering and
page token format as the database store, so callers can swap one for the
other. Contents are lost when the process exits.
"""

import threading
from dataclasses import dataclass
from datetime import datetime

import structlog

from push_config.config import (
    ConfigProvider,
    DjangoSettingsConfigProvider,
    load_max_page_size,
)
from push_config.exceptions import InvalidParamsError
from push_config.identity import TaskConfigKey, with_default_config_id
from push_config.pagination import (
    current_timestamp,
    decode_page_token,
    encode_page_token,
    is_after_cursor,
    keyset_sort_key,
)
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


@dataclass
class _StoredConfig:
    config: PushNotificationConfig
    created_at: datetime | None


class InMemoryPushNotificationConfigStore(PushNotificationConfigStore):
    """Keep push notification configs in a dict guarded by a lock."""

    def __init__(self, config_provider: ConfigProvider | None = None) -> None:
        """Initialize the store.

        Args:
            config_provider: Source of configuration properties. Defaults to
                Django settings.
        """
        self._lock = threading.Lock()
        self._configs: dict[str, dict[str, _StoredConfig]] = {}
        self.max_page_size = load_max_page_size(
            config_provider or DjangoSettingsConfigProvider()
        )

    def set_info(
        self, task_id: str, notification_config: PushNotificationConfig
    ) -> PushNotificationConfig:
        notification_config = with_default_config_id(task_id, notification_config)
        config_id = notification_config.id

        with self._lock:
            task_configs = self._configs.setdefault(task_id, {})
            existing = task_configs.get(config_id)
            if existing is not None:
                existing.config = notification_config.model_copy(deep=True)
                logger.debug(
                    "push_config_updated", task_id=task_id, config_id=config_id
                )
            else:
                task_configs[config_id] = _StoredConfig(
                    config=notification_config.model_copy(deep=True),
                    created_at=current_timestamp(),
                )
                logger.debug(
                    "push_config_persisted", task_id=task_id, config_id=config_id
                )
        return notification_config

    def get_info(
        self, params: ListTaskPushNotificationConfigParams
    ) -> ListTaskPushNotificationConfigResult:
        task_id = params.id
        try:
            cursor = decode_page_token(params.page_token)
        except InvalidParamsError as e:
            logger.warning(
                "push_configs_invalid_params", task_id=task_id, error=e.message
            )
            raise
        page_size = params.get_effective_page_size(self.max_page_size)

        with self._lock:
            entries = sorted(
                (
                    (config_id, stored.created_at, stored.config.model_copy(deep=True))
                    for config_id, stored in self._configs.get(task_id, {}).items()
                    if is_after_cursor(stored.created_at, config_id, cursor)
                ),
                key=lambda entry: keyset_sort_key(entry[1], entry[0]),
            )

        next_page_token = None
        if len(entries) > page_size:
            entries = entries[:page_size]
            last_id, last_created_at, _ = entries[-1]
            next_page_token = encode_page_token(last_created_at, last_id)

        return ListTaskPushNotificationConfigResult(
            configs=[
                TaskPushNotificationConfig(
                    task_id=task_id,
                    push_notification_config=config,
                    tenant=params.tenant,
                )
                for _, _, config in entries
            ],
            next_page_token=next_page_token,
        )

    def delete_info(self, task_id: str, config_id: str | None = None) -> None:
        key = TaskConfigKey.resolve(task_id, config_id)
        with self._lock:
            task_configs = self._configs.get(key.task_id, {})
            removed = task_configs.pop(key.config_id, None)
            if not task_configs:
                self._configs.pop(key.task_id, None)

        if removed is None:
            logger.debug(
                "push_config_not_found_for_deletion",
                task_id=key.task_id,
                config_id=key.config_id,
            )
        else:
            logger.debug(
                "push_config_deleted", task_id=key.task_id, config_id=key.config_id
            )
