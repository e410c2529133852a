import uuid

import django.db.models.deletion
from django.db import migrations, models


STATUS_CHOICES = [
    ("Pending", "Pending"),
    ("In Progress", "In Progress"),
    ("Resolved", "Resolved"),
    ("Rejected", "Rejected"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="HostelRoom",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("room_number", models.CharField(max_length=20)),
                ("block", models.CharField(max_length=20)),
                ("capacity", models.PositiveIntegerField()),
                ("occupants", models.JSONField(blank=True, default=list)),
            ],
            options={
                "ordering": ["block", "room_number"],
                "constraints": [
                    models.UniqueConstraint(fields=("block", "room_number"), name="unique_room_per_block")
                ],
            },
        ),
        migrations.CreateModel(
            name="RoomRequest",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.CharField(max_length=255)),
                (
                    "request_type",
                    models.CharField(
                        choices=[("Change", "Change"), ("Maintenance", "Maintenance")], max_length=20
                    ),
                ),
                ("description", models.TextField()),
                ("status", models.CharField(choices=STATUS_CHOICES, default="Pending", max_length=20)),
                ("submitted_at", models.DateTimeField()),
                ("resolved_at", models.DateTimeField(blank=True, null=True)),
                ("admin_notes", models.TextField(blank=True, null=True)),
                (
                    "current_room",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to="hostel.hostelroom",
                    ),
                ),
                (
                    "preferred_room",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to="hostel.hostelroom",
                    ),
                ),
            ],
            options={
                "ordering": ["-submitted_at"],
                "indexes": [models.Index(fields=["status"], name="room_request_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="Complaint",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.CharField(max_length=255)),
                ("category", models.CharField(max_length=100)),
                ("description", models.TextField()),
                ("status", models.CharField(choices=STATUS_CHOICES, default="Pending", max_length=20)),
                ("submitted_at", models.DateTimeField()),
                ("resolved_at", models.DateTimeField(blank=True, null=True)),
                ("admin_notes", models.TextField(blank=True, null=True)),
                (
                    "room",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="complaints",
                        to="hostel.hostelroom",
                    ),
                ),
            ],
            options={
                "ordering": ["-submitted_at"],
                "indexes": [models.Index(fields=["status"], name="complaint_status_idx")],
            },
        ),
    ]
