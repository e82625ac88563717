"""Keyset query construction.

Configs are ordered newest first by ``COALESCE(created_at, sentinel)`` with
``config_id`` ascending as the tie-break. The tie-break makes the order total
even when many configs share a timestamp (or have none), so a page boundary
never skips or repeats a config.
"""

from datetime import datetime

from django.db.models import DateTimeField, Q, QuerySet, Value
from django.db.models.functions import Coalesce

from push_config.constants import NULL_TIMESTAMP_SENTINEL
from push_config.pagination.cursor import LogicalTimestamp, PageCursor

SORT_CREATED_AT = "sort_created_at"


def build_keyset_queryset(
    queryset: QuerySet, cursor: PageCursor | None, limit: int
) -> QuerySet:
    """Return the ordered, cursor-filtered slice of ``queryset``.

    Args:
        queryset: Configs already filtered to a single task.
        cursor: Position of the last config of the previous page, if any.
        limit: Maximum number of rows to fetch.

    Returns:
        QuerySet ordered by creation time descending then config id ascending.
    """
    queryset = queryset.annotate(
        **{
            SORT_CREATED_AT: Coalesce(
                "created_at",
                Value(NULL_TIMESTAMP_SENTINEL, output_field=DateTimeField()),
                output_field=DateTimeField(),
            )
        }
    )

    if cursor is not None:
        cursor_at = cursor.timestamp.to_datetime()
        queryset = queryset.filter(
            Q(**{f"{SORT_CREATED_AT}__lt": cursor_at})
            | Q(**{SORT_CREATED_AT: cursor_at, "config_id__gt": cursor.id})
        )

    return queryset.order_by(f"-{SORT_CREATED_AT}", "config_id")[:limit]


def keyset_sort_key(created_at: datetime | None, config_id: str) -> tuple:
    """Sort key giving the keyset order for in-memory collections.

    Use with ``sorted(...)``; newest first, then config id ascending.
    """
    return (-LogicalTimestamp.of(created_at).to_epoch_millis(), config_id)


def is_after_cursor(
    created_at: datetime | None, config_id: str, cursor: PageCursor | None
) -> bool:
    """Whether a config sorts strictly after ``cursor`` in keyset order."""
    if cursor is None:
        return True
    timestamp = LogicalTimestamp.of(created_at)
    if timestamp < cursor.timestamp:
        return True
    return timestamp == cursor.timestamp and config_id > cursor.id
