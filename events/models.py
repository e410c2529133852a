"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    speaker = models.CharField(max_length=255)
    room_assignment = models.CharField(max_length=255)
    date = models.DateTimeField()
    total_seats = models.PositiveIntegerField()
    registered_seats = models.PositiveIntegerField(default=0)
    cost = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    sponsorship = models.CharField(max_length=255, blank=True, null=True)
    estimated_cost = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    sponsorship_amount = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(registered_seats__lte=models.F("total_seats")),
                name="event_registered_within_capacity",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Registration(models.Model):
    """Persistence model for event registrations."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="registrations")
    user_id = models.CharField(max_length=255)
    registered_at = models.DateTimeField()
    token = models.CharField(max_length=64, unique=True)
    document_url = models.CharField(max_length=500, blank=True, null=True)

    class Meta:
        ordering = ["registered_at"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user_id"], name="unique_registration_per_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.event.name}"
