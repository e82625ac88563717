"""Constants shared across the push notification config store."""

from datetime import UTC, datetime

# Stands in for a NULL created_at inside ordering and comparison expressions.
# Never a real creation time.
NULL_TIMESTAMP_SENTINEL = datetime(1970, 1, 1, tzinfo=UTC)

MAX_PAGE_SIZE_PROPERTY = "a2a.push-notification-config.max-page-size"
DEFAULT_MAX_PAGE_SIZE = 100

PAGE_TOKEN_SEPARATOR = ":"

# Store implementations selectable through settings.PUSH_NOTIFICATION_CONFIG_STORE
STORE_BACKEND_DATABASE = "database"
STORE_BACKEND_MEMORY = "memory"

# JSON-RPC error codes used by the A2A protocol
INVALID_PARAMS_ERROR_CODE = -32602
INTERNAL_ERROR_CODE = -32603
