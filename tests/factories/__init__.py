"""Builders for push notification config test data."""

from faker import Faker

from push_config.schemas import (
    PushNotificationAuthenticationInfo,
    PushNotificationConfig,
)

fake = Faker()


def build_push_notification_config(
    config_id: str | None = None, with_auth: bool = False, **overrides
) -> PushNotificationConfig:
    """Build a PushNotificationConfig with a random webhook URL and token.

    Args:
        config_id: Config id; None leaves it to the store's defaulting.
        with_auth: Attach bearer authentication info.
        **overrides: Field values taking precedence over generated ones.
    """
    fields = {
        "url": fake.url() + "webhook",
        "id": config_id,
        "token": fake.sha1(),
    }
    if with_auth:
        fields["authentication"] = PushNotificationAuthenticationInfo(
            schemes=["Bearer"], credentials=fake.sha256()
        )
    fields.update(overrides)
    return PushNotificationConfig(**fields)
