"""Django ORM models (persistence layer) for volunteers."""

import uuid

from django.db import models


class Volunteer(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class VolunteerAssignment(models.Model):
    """A volunteer's assignment to one event, with attendance and task."""

    volunteer = models.ForeignKey(Volunteer, on_delete=models.CASCADE, related_name="assignments")
    event = models.ForeignKey(
        "events.Event", on_delete=models.CASCADE, related_name="volunteer_assignments"
    )
    attended = models.BooleanField(null=True, blank=True)
    task = models.CharField(max_length=255, blank=True, null=True)
    assigned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["assigned_at"]
        constraints = [
            models.UniqueConstraint(fields=["volunteer", "event"], name="unique_volunteer_assignment"),
        ]

    def __str__(self) -> str:
        return f"{self.volunteer.name} @ {self.event.name}"
