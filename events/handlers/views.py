"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from eduevent.handlers import DomainAPIView
from events.cache import EVENT_LIST_CACHE_KEY, cached_read, event_detail_cache_key
from events.dependencies import (
    get_certificate_service,
    get_document_service,
    get_event_service,
    get_finance_service,
    get_registration_service,
)
from events.domain.errors import ErrorCode
from events.handlers.serializers import (
    CertificateRequestSerializer,
    DocumentUploadSerializer,
    EventCreateSerializer,
    EventSerializer,
    FinancialsUpdateSerializer,
    FinancialSummarySerializer,
    RegistrationRequestSerializer,
    RegistrationSerializer,
    UploadedDocumentSerializer,
)

ERROR_STATUSES = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_DOCUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DOCUMENT_OWNER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_FULL: status.HTTP_409_CONFLICT,
    ErrorCode.CAPACITY_RACE_LOST: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_REGISTRATION: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_REGISTERED: status.HTTP_409_CONFLICT,
}


class EventAPIView(DomainAPIView):
    error_statuses = ERROR_STATUSES


class EventListView(EventAPIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        data = cached_read(
            EVENT_LIST_CACHE_KEY,
            lambda: list(EventSerializer(get_event_service().list_events(), many=True).data),
        )
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(**serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventAPIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        data = cached_read(
            event_detail_cache_key(event_id),
            lambda: dict(EventSerializer(get_event_service().get_event(event_id)).data),
        )
        return Response(data)


class EventFinancialsView(EventAPIView):
    """Handler for PATCH /api/events/{event_id}/financials"""

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = FinancialsUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_financials(event_id, **serializer.validated_data)
        return Response(EventSerializer(event).data)


class RegistrationListView(EventAPIView):
    """Handler for GET/POST /api/events/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        registrations = get_registration_service().list_registrations(event_id)
        return Response(RegistrationSerializer(registrations, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = RegistrationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        registration = get_registration_service().register(
            event_id,
            serializer.validated_data["user_id"],
            serializer.validated_data.get("document_url") or None,
        )
        return Response(RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED)


class CertificateView(EventAPIView):
    """Handler for POST /api/events/{event_id}/certificate"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = CertificateRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        text = get_certificate_service().generate(
            event_id,
            serializer.validated_data["user_id"],
            serializer.validated_data["participant_name"],
        )
        return Response({"certificate": text})


class DocumentUploadView(EventAPIView):
    """Handler for POST /api/documents"""

    def post(self, request: Request) -> Response:
        serializer = DocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        document = get_document_service().upload(
            serializer.validated_data["file"],
            serializer.validated_data["user_id"],
            serializer.validated_data.get("event_id") or None,
        )
        return Response(UploadedDocumentSerializer(document).data, status=status.HTTP_201_CREATED)


class FinanceReportView(EventAPIView):
    """Handler for GET /api/finance/report"""

    def get(self, request: Request) -> Response:
        summary = get_finance_service().generate_report()
        return Response(FinancialSummarySerializer(summary).data)
