"""Unit tests for push_config.logging.processors module."""

import os
import unittest
from unittest.mock import patch

from push_config.logging import clear_request_id, set_request_id
from push_config.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)


class TestProcessors(unittest.TestCase):
    """Tests for the custom structlog processors."""

    def tearDown(self):
        """Clean up after test."""
        clear_request_id()

    def test_add_request_context_with_id(self):
        """Test that the current request id is added."""
        set_request_id("req-42")

        event = add_request_context(None, "info", {"event": "x"})

        self.assertEqual(event["request_id"], "req-42")

    def test_add_request_context_without_id(self):
        """Test that nothing is added when no request id is set."""
        event = add_request_context(None, "info", {"event": "x"})

        self.assertNotIn("request_id", event)

    @patch.dict(os.environ, {"SERVICE_NAME": "svc", "ENVIRONMENT": "prod"})
    def test_add_service_context_from_environment(self):
        """Test service metadata read from the environment."""
        event = add_service_context(None, "info", {})

        self.assertEqual(event["service_name"], "svc")
        self.assertEqual(event["environment"], "prod")

    @patch.dict(os.environ, {}, clear=True)
    def test_add_service_context_defaults(self):
        """Test service metadata defaults."""
        event = add_service_context(None, "info", {})

        self.assertEqual(event["service_name"], "push-config-store")
        self.assertEqual(event["environment"], "development")

    def test_add_process_info(self):
        """Test process and thread ids."""
        event = add_process_info(None, "info", {})

        self.assertEqual(event["process_id"], os.getpid())
        self.assertIn("thread_id", event)

    def test_console_renderer_includes_fields(self):
        """Test the console line layout."""
        line = console_renderer(
            None,
            "info",
            {
                "level": "warning",
                "timestamp": "2026-01-01T00:00:00Z",
                "request_id": "req-7",
                "logger": "push_config.services",
                "event": "push_configs_invalid_params",
                "task_id": "t1",
                "process_id": 1,
            },
        )

        self.assertIn("[WARNING ]", line)
        self.assertIn("req-7", line)
        self.assertIn("push_configs_invalid_params", line)
        self.assertIn("task_id=t1", line)
        self.assertNotIn("process_id", line)


if __name__ == "__main__":
    unittest.main()
