"""Unit tests for InMemoryPushNotificationConfigStore."""

import threading
import unittest

from push_config.config import DjangoSettingsConfigProvider
from push_config.constants import MAX_PAGE_SIZE_PROPERTY
from push_config.services import InMemoryPushNotificationConfigStore
from tests.factories import build_push_notification_config
from tests.store_contract import StoreContractMixin


class TestInMemoryPushNotificationConfigStore(StoreContractMixin, unittest.TestCase):
    """Store contract run against the in-memory store."""

    def make_store(self, max_page_size: int = 100):
        return InMemoryPushNotificationConfigStore(
            DjangoSettingsConfigProvider({MAX_PAGE_SIZE_PROPERTY: str(max_page_size)})
        )

    def set_created_at(self, store, task_id, config_id, created_at):
        store._configs[task_id][config_id].created_at = created_at

    def get_created_at(self, store, task_id, config_id):
        return store._configs[task_id][config_id].created_at

    def test_stored_config_is_isolated_from_caller(self):
        """Test that mutating a returned config does not change the store."""
        self.store.set_info("t1", build_push_notification_config("a"))

        listed = self.list_page("t1").configs[0].push_notification_config
        listed.url = "https://changed.example.com"

        again = self.list_page("t1").configs[0].push_notification_config
        self.assertNotEqual(again.url, "https://changed.example.com")

    def test_deleting_last_config_drops_task(self):
        """Test that an emptied task leaves no bookkeeping behind."""
        self.store.set_info("t1", build_push_notification_config("a"))

        self.store.delete_info("t1", "a")

        self.assertNotIn("t1", self.store._configs)

    def test_concurrent_writers_keep_one_record_per_key(self):
        """Test that parallel upserts of the same key leave a single config."""
        configs = [build_push_notification_config("shared") for _ in range(20)]
        threads = [
            threading.Thread(target=self.store.set_info, args=("t1", config))
            for config in configs
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        result = self.list_page("t1")

        self.assertEqual(len(result.configs), 1)
        self.assertIn(result.configs[0].push_notification_config, configs)

    def test_max_page_size_read_once(self):
        """Test the max page size captured at construction."""
        self.assertEqual(self.make_store(max_page_size=7).max_page_size, 7)


if __name__ == "__main__":
    unittest.main()
