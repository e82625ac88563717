"""Django settings for the push notification config store.

Values are read from the environment so the same module serves local
development (SQLite) and deployments (PostgreSQL). Test overrides live in
``push_config_service.settings_test``.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-only-key")

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "push_config",
]

MIDDLEWARE: list[str] = []

# Database
# PostgreSQL is used when POSTGRES_DB is set, SQLite otherwise.
if os.getenv("POSTGRES_DB"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("POSTGRES_DB"),
            "USER": os.getenv("POSTGRES_USER", "postgres"),
            "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
            "HOST": os.getenv("POSTGRES_HOST", "localhost"),
            "PORT": os.getenv("POSTGRES_PORT", "5432"),
            "OPTIONS": {
                "options": f"-c search_path={os.getenv('POSTGRES_SCHEMA', 'public')}"
            },
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Push notification config store
# Which store implementation get_push_notification_config_store() builds:
# "database" (Django ORM) or "memory" (non-persistent).
PUSH_NOTIFICATION_CONFIG_STORE = os.getenv("PUSH_NOTIFICATION_CONFIG_STORE", "database")

# String-valued properties served by DjangoSettingsConfigProvider.
# Absent keys fall back to the defaults in push_config.constants.
A2A_CONFIG: dict[str, str] = {}
if os.getenv("A2A_PUSH_NOTIFICATION_CONFIG_MAX_PAGE_SIZE"):
    A2A_CONFIG["a2a.push-notification-config.max-page-size"] = os.environ[
        "A2A_PUSH_NOTIFICATION_CONFIG_MAX_PAGE_SIZE"
    ]

# Structlog setup happens in PushConfigAppConfig.ready() when enabled.
STRUCTURED_LOGGING = os.getenv("STRUCTURED_LOGGING", "true").lower() == "true"
