"""Unit tests for push_config.exceptions module."""

import unittest

from push_config.exceptions import (
    ConfigPropertyNotFoundError,
    InvalidParamsError,
    PushConfigError,
    PushNotificationConfigFormatError,
    PushNotificationConfigStoreError,
)


class TestStoreExceptions(unittest.TestCase):
    """Tests for the store exception hierarchy."""

    def test_all_errors_share_base_class(self):
        """Test that every store error is a PushConfigError."""
        for error_class in (
            ConfigPropertyNotFoundError,
            InvalidParamsError,
            PushNotificationConfigFormatError,
            PushNotificationConfigStoreError,
        ):
            with self.subTest(error_class=error_class.__name__):
                self.assertTrue(issubclass(error_class, PushConfigError))

    def test_invalid_params_error_code(self):
        """Test the JSON-RPC invalid params code."""
        error = InvalidParamsError("bad token")

        self.assertEqual(error.code, -32602)
        self.assertEqual(error.message, "bad token")
        self.assertEqual(str(error), "bad token")

    def test_store_error_carries_identity(self):
        """Test that store errors keep the failing task and config."""
        error = PushNotificationConfigStoreError("boom", task_id="t1", config_id="c1")

        self.assertEqual(error.code, -32603)
        self.assertEqual(error.task_id, "t1")
        self.assertEqual(error.config_id, "c1")

    def test_invalid_params_is_not_a_store_error(self):
        """Test that client and internal errors stay distinguishable."""
        self.assertFalse(
            issubclass(InvalidParamsError, PushNotificationConfigStoreError)
        )

    def test_config_property_not_found_message(self):
        """Test the missing property message."""
        error = ConfigPropertyNotFoundError("a.b")

        self.assertIn("a.b", str(error))
        self.assertIsNone(error.code)


if __name__ == "__main__":
    unittest.main()
