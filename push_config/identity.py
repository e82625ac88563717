"""Record identity and config id defaulting.

A stored config is identified by ``(task_id, config_id)``. When a caller
omits the config id it defaults to the task id, so a task with a single
config can be addressed by its task id alone.
"""

from dataclasses import dataclass

from push_config.schemas import PushNotificationConfig


@dataclass(frozen=True)
class TaskConfigKey:
    """Composite key of one stored push notification config."""

    task_id: str
    config_id: str

    @classmethod
    def resolve(cls, task_id: str, config_id: str | None = None) -> "TaskConfigKey":
        """Build a key, defaulting an empty ``config_id`` to ``task_id``."""
        return cls(task_id=task_id, config_id=resolve_config_id(task_id, config_id))


def resolve_config_id(task_id: str, config_id: str | None) -> str:
    """Return ``config_id``, or ``task_id`` when it is None or empty."""
    if not config_id:
        return task_id
    return config_id


def with_default_config_id(
    task_id: str, config: PushNotificationConfig
) -> PushNotificationConfig:
    """Return ``config`` with its id defaulted to ``task_id`` when missing.

    The input is never mutated; a copy is returned when the id changes.
    """
    if config.id:
        return config
    return config.model_copy(update={"id": task_id})
