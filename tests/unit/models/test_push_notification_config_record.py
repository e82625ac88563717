"""Tests for the PushNotificationConfigRecord model's payload handling."""

import json

from django.test import SimpleTestCase

from push_config.exceptions import PushNotificationConfigFormatError
from push_config.models import PushNotificationConfigRecord
from push_config.schemas import PushNotificationConfig
from tests.factories import build_push_notification_config


class TestPushNotificationConfigRecordPayload(SimpleTestCase):
    """Tests for serializing and deserializing the stored config."""

    def test_serialized_config_reads_back(self):
        """Test that a config survives storage as JSON."""
        config = build_push_notification_config("c1", with_auth=True)
        record = PushNotificationConfigRecord(task_id="t1", config_id="c1")

        record.config_json = PushNotificationConfigRecord.serialize_config(config)

        self.assertEqual(record.get_config(), config)

    def test_serialized_payload_uses_camel_case_and_skips_none(self):
        """Test the stored JSON shape."""
        config = PushNotificationConfig(url="https://example.com/hook", id="c1")

        payload = json.loads(PushNotificationConfigRecord.serialize_config(config))

        self.assertEqual(payload, {"url": "https://example.com/hook", "id": "c1"})

    def test_get_config_rejects_invalid_json(self):
        """Test that a corrupt payload raises a format error."""
        record = PushNotificationConfigRecord(
            task_id="t1", config_id="c1", config_json="{not json"
        )

        with self.assertRaises(PushNotificationConfigFormatError):
            record.get_config()

    def test_get_config_rejects_missing_fields(self):
        """Test that JSON without a url is not a valid config."""
        record = PushNotificationConfigRecord(
            task_id="t1", config_id="c1", config_json='{"id": "c1"}'
        )

        with self.assertRaises(PushNotificationConfigFormatError):
            record.get_config()

    def test_str_and_repr(self):
        """Test string representations."""
        record = PushNotificationConfigRecord(task_id="t1", config_id="c1")

        self.assertEqual(str(record), "push config c1 for task t1")
        self.assertIn("task_id=t1", repr(record))
        self.assertIn("config_id=c1", repr(record))
