"""Logging utilities for the push config store."""

from push_config.logging.config import setup_logging
from push_config.logging.context import clear_request_id, get_request_id, set_request_id

__all__ = [
    "clear_request_id",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
