"""Django application configuration for push_config."""

from django.apps import AppConfig
from django.conf import settings


class PushConfigAppConfig(AppConfig):
    """Configuration class for the push notification config app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "push_config"
    verbose_name = "Push notification configs"

    def ready(self) -> None:
        """Configure structured logging once the app registry is ready."""
        if getattr(settings, "STRUCTURED_LOGGING", False):
            from push_config.logging import setup_logging  # noqa: PLC0415

            setup_logging()
