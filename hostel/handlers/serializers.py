from rest_framework import serializers

from hostel.domain import RequestStatus, RequestType

STATUS_VALUES = [s.value for s in RequestStatus]
REQUEST_TYPE_VALUES = [t.value for t in RequestType]


class HostelRoomSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    room_number = serializers.CharField()
    block = serializers.CharField()
    capacity = serializers.IntegerField()
    occupants = serializers.ListField(child=serializers.CharField())
    has_vacancy = serializers.BooleanField()


class RoomRequestSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    user_id = serializers.CharField()
    request_type = serializers.CharField(source="request_type.value")
    current_room_id = serializers.UUIDField(allow_null=True)
    preferred_room_id = serializers.UUIDField(allow_null=True)
    description = serializers.CharField()
    status = serializers.CharField(source="status.value")
    submitted_at = serializers.DateTimeField()
    resolved_at = serializers.DateTimeField(allow_null=True)
    admin_notes = serializers.CharField(allow_null=True)


class ComplaintSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    user_id = serializers.CharField()
    room_id = serializers.UUIDField(allow_null=True)
    category = serializers.CharField()
    description = serializers.CharField()
    status = serializers.CharField(source="status.value")
    submitted_at = serializers.DateTimeField()
    resolved_at = serializers.DateTimeField(allow_null=True)
    admin_notes = serializers.CharField(allow_null=True)


# ---------- Requests ----------


class StatusFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_VALUES, required=False)


class RoomRequestCreateSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)
    request_type = serializers.ChoiceField(choices=REQUEST_TYPE_VALUES)
    description = serializers.CharField()
    current_room_id = serializers.UUIDField(required=False, allow_null=True)
    preferred_room_id = serializers.UUIDField(required=False, allow_null=True)


class ComplaintCreateSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)
    category = serializers.CharField(max_length=100)
    description = serializers.CharField()
    room_id = serializers.UUIDField(required=False, allow_null=True)


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_VALUES)
    admin_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
