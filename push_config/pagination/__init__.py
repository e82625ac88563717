"""Keyset pagination for push notification configs."""

from push_config.pagination.cursor import (
    LogicalTimestamp,
    PageCursor,
    current_timestamp,
    decode_page_token,
    encode_page_token,
)
from push_config.pagination.keyset import (
    build_keyset_queryset,
    is_after_cursor,
    keyset_sort_key,
)

__all__ = [
    "LogicalTimestamp",
    "PageCursor",
    "build_keyset_queryset",
    "current_timestamp",
    "decode_page_token",
    "encode_page_token",
    "is_after_cursor",
    "keyset_sort_key",
]
