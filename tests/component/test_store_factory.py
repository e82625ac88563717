"""Component tests for store selection."""

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from push_config.services import (
    DatabasePushNotificationConfigStore,
    InMemoryPushNotificationConfigStore,
    get_push_notification_config_store,
    reset_push_notification_config_store,
)


class TestStoreFactory(SimpleTestCase):
    """Tests for get_push_notification_config_store."""

    def setUp(self):
        """Set up test fixtures."""
        reset_push_notification_config_store()

    def tearDown(self):
        """Clean up after test."""
        reset_push_notification_config_store()

    @override_settings(PUSH_NOTIFICATION_CONFIG_STORE="database")
    def test_database_store_selected(self):
        """Test the database setting."""
        self.assertIsInstance(
            get_push_notification_config_store(), DatabasePushNotificationConfigStore
        )

    @override_settings(PUSH_NOTIFICATION_CONFIG_STORE="memory")
    def test_memory_store_selected(self):
        """Test the memory setting."""
        self.assertIsInstance(
            get_push_notification_config_store(), InMemoryPushNotificationConfigStore
        )

    @override_settings(PUSH_NOTIFICATION_CONFIG_STORE="memory")
    def test_store_is_built_once(self):
        """Test that repeated calls share one store."""
        self.assertIs(
            get_push_notification_config_store(), get_push_notification_config_store()
        )

    @override_settings(
        PUSH_NOTIFICATION_CONFIG_STORE="memory",
        A2A_CONFIG={"a2a.push-notification-config.max-page-size": "15"},
    )
    def test_store_reads_max_page_size_from_settings(self):
        """Test that the selected store picks up A2A_CONFIG."""
        self.assertEqual(get_push_notification_config_store().max_page_size, 15)

    @override_settings(PUSH_NOTIFICATION_CONFIG_STORE="redis")
    def test_unknown_store_rejected(self):
        """Test that an unknown backend name is a configuration error."""
        with self.assertRaises(ImproperlyConfigured) as ctx:
            get_push_notification_config_store()

        self.assertIn("redis", str(ctx.exception))
