from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PushNotificationConfigRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "task_id",
                    models.CharField(
                        help_text="Task the config belongs to", max_length=255
                    ),
                ),
                (
                    "config_id",
                    models.CharField(
                        help_text="Config identifier, unique within a task",
                        max_length=255,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the config was first stored",
                        null=True,
                    ),
                ),
                (
                    "config_json",
                    models.TextField(help_text="Serialized push notification config"),
                ),
            ],
            options={
                "db_table": "push_notification_configs",
                "indexes": [
                    models.Index(
                        fields=["task_id", "-created_at", "config_id"],
                        name="ix_push_configs_task_created",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("task_id", "config_id"),
                        name="uq_push_notification_configs_task_config",
                    )
                ],
            },
        ),
    ]
