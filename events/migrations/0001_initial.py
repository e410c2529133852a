import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("speaker", models.CharField(max_length=255)),
                ("room_assignment", models.CharField(max_length=255)),
                ("date", models.DateTimeField()),
                ("total_seats", models.PositiveIntegerField()),
                ("registered_seats", models.PositiveIntegerField(default=0)),
                ("cost", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("sponsorship", models.CharField(blank=True, max_length=255, null=True)),
                ("estimated_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("sponsorship_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="event_created_at_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("registered_seats__lte", models.F("total_seats"))),
                        name="event_registered_within_capacity",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.CharField(max_length=255)),
                ("registered_at", models.DateTimeField()),
                ("token", models.CharField(max_length=64, unique=True)),
                ("document_url", models.CharField(blank=True, max_length=500, null=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrations",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["registered_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("event", "user_id"), name="unique_registration_per_user")
                ],
            },
        ),
    ]
