"""Serializers for transforming domain models to API responses, and for
validating the format of incoming request bodies.
"""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    speaker = serializers.CharField()
    room_assignment = serializers.CharField()
    date = serializers.DateTimeField()
    total_seats = serializers.IntegerField(source="total_seats.value")
    registered_seats = serializers.IntegerField()
    seats_available = serializers.IntegerField()
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, source="cost.amount")
    sponsorship = serializers.CharField(allow_null=True)
    estimated_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="estimated_cost.amount", allow_null=True
    )
    sponsorship_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="sponsorship_amount.amount", allow_null=True
    )
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    user_id = serializers.CharField()
    registered_at = serializers.DateTimeField()
    token = serializers.CharField()
    document_url = serializers.CharField(allow_null=True)


class FinancialEventDetailSerializer(serializers.Serializer):
    event_id = serializers.CharField()
    event_name = serializers.CharField()
    estimated_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    sponsorship_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    net = serializers.DecimalField(max_digits=13, decimal_places=2)


class FinancialSummarySerializer(serializers.Serializer):
    total_estimated_cost = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_sponsorship_received = serializers.DecimalField(max_digits=14, decimal_places=2)
    net_position = serializers.DecimalField(max_digits=15, decimal_places=2)
    events = FinancialEventDetailSerializer(many=True)


class UploadedDocumentSerializer(serializers.Serializer):
    url = serializers.CharField()
    name = serializers.CharField()
    content_type = serializers.CharField(allow_null=True)


# ---------- Requests ----------


class EventCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, default="")
    speaker = serializers.CharField(max_length=255)
    room_assignment = serializers.CharField(max_length=255)
    date = serializers.DateTimeField()
    total_seats = serializers.IntegerField(min_value=1)
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, default=0)
    sponsorship = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    estimated_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    sponsorship_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )


class FinancialsUpdateSerializer(serializers.Serializer):
    estimated_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    sponsorship_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )


class RegistrationRequestSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)
    document_url = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)


class CertificateRequestSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)
    participant_name = serializers.CharField(max_length=255)


class DocumentUploadSerializer(serializers.Serializer):
    file = serializers.FileField(allow_empty_file=True)
    user_id = serializers.CharField(max_length=255)
    event_id = serializers.CharField(max_length=64, required=False, allow_blank=True)
