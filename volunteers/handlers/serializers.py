"""Serializers for Volunteer responses and requests."""

from rest_framework import serializers


class VolunteerSerializer(serializers.Serializer):
    """Serializer for Volunteer domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    assigned_event_ids = serializers.SerializerMethodField()
    attendance = serializers.SerializerMethodField()
    tasks = serializers.SerializerMethodField()

    def get_assigned_event_ids(self, volunteer) -> list[str]:
        return [str(event_id) for event_id in volunteer.assigned_event_ids]

    def get_attendance(self, volunteer) -> dict[str, bool]:
        return {str(event_id): attended for event_id, attended in volunteer.attendance.items()}

    def get_tasks(self, volunteer) -> dict[str, str]:
        return {str(event_id): task for event_id, task in volunteer.tasks.items()}


class VolunteerCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()


class AttendanceSerializer(serializers.Serializer):
    attended = serializers.BooleanField()


class TaskSerializer(serializers.Serializer):
    task = serializers.CharField(max_length=255)
