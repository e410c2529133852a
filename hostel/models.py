"""Django ORM models (persistence layer) for the hostel."""

import uuid

from django.db import models

from hostel.domain import RequestStatus, RequestType

STATUS_CHOICES = [(s.value, s.value) for s in RequestStatus]
REQUEST_TYPE_CHOICES = [(t.value, t.value) for t in RequestType]


class HostelRoom(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    room_number = models.CharField(max_length=20)
    block = models.CharField(max_length=20)
    capacity = models.PositiveIntegerField()
    occupants = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ["block", "room_number"]
        constraints = [
            models.UniqueConstraint(fields=["block", "room_number"], name="unique_room_per_block"),
        ]

    def __str__(self) -> str:
        return f"{self.block}-{self.room_number}"


class RoomRequest(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=255)
    request_type = models.CharField(max_length=20, choices=REQUEST_TYPE_CHOICES)
    current_room = models.ForeignKey(
        HostelRoom, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    preferred_room = models.ForeignKey(
        HostelRoom, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    description = models.TextField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=RequestStatus.PENDING.value)
    submitted_at = models.DateTimeField()
    resolved_at = models.DateTimeField(null=True, blank=True)
    admin_notes = models.TextField(null=True, blank=True)

    class Meta:
        ordering = ["-submitted_at"]
        indexes = [
            models.Index(fields=["status"], name="room_request_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.request_type} request by {self.user_id}"


class Complaint(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=255)
    room = models.ForeignKey(
        HostelRoom, on_delete=models.SET_NULL, null=True, blank=True, related_name="complaints"
    )
    category = models.CharField(max_length=100)
    description = models.TextField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=RequestStatus.PENDING.value)
    submitted_at = models.DateTimeField()
    resolved_at = models.DateTimeField(null=True, blank=True)
    admin_notes = models.TextField(null=True, blank=True)

    class Meta:
        ordering = ["-submitted_at"]
        indexes = [
            models.Index(fields=["status"], name="complaint_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.category} complaint by {self.user_id}"
