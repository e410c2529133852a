"""HTTP handlers (views) for hostel rooms, requests and complaints."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from eduevent.handlers import DomainAPIView
from hostel.dependencies import get_hostel_service
from hostel.domain import RequestStatus, RequestType
from hostel.domain.errors import ErrorCode
from hostel.handlers.serializers import (
    ComplaintCreateSerializer,
    ComplaintSerializer,
    HostelRoomSerializer,
    RoomRequestCreateSerializer,
    RoomRequestSerializer,
    StatusFilterSerializer,
    StatusUpdateSerializer,
)

ERROR_STATUSES = {
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ROOM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REQUEST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.COMPLAINT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class HostelAPIView(DomainAPIView):
    error_statuses = ERROR_STATUSES


def _status_filter(request: Request) -> RequestStatus | None:
    serializer = StatusFilterSerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    value = serializer.validated_data.get("status")
    return RequestStatus(value) if value else None


class RoomListView(HostelAPIView):
    """Handler for GET /api/hostel/rooms"""

    def get(self, request: Request) -> Response:
        rooms = get_hostel_service().list_rooms()
        return Response(HostelRoomSerializer(rooms, many=True).data)


class RoomDetailView(HostelAPIView):
    """Handler for GET /api/hostel/rooms/{room_id}"""

    def get(self, request: Request, room_id: str) -> Response:
        room = get_hostel_service().get_room(room_id)
        return Response(HostelRoomSerializer(room).data)


class RoomRequestListView(HostelAPIView):
    """Handler for GET/POST /api/hostel/requests"""

    def get(self, request: Request) -> Response:
        requests = get_hostel_service().list_requests(_status_filter(request))
        return Response(RoomRequestSerializer(requests, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = RoomRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        room_request = get_hostel_service().create_request(
            user_id=data["user_id"],
            request_type=RequestType(data["request_type"]),
            description=data["description"],
            current_room_id=data.get("current_room_id"),
            preferred_room_id=data.get("preferred_room_id"),
        )
        return Response(RoomRequestSerializer(room_request).data, status=status.HTTP_201_CREATED)


class RoomRequestDetailView(HostelAPIView):
    """Handler for PATCH /api/hostel/requests/{request_id}"""

    def patch(self, request: Request, request_id: str) -> Response:
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        room_request = get_hostel_service().update_request_status(
            request_id,
            RequestStatus(serializer.validated_data["status"]),
            serializer.validated_data.get("admin_notes"),
        )
        return Response(RoomRequestSerializer(room_request).data)


class ComplaintListView(HostelAPIView):
    """Handler for GET/POST /api/hostel/complaints"""

    def get(self, request: Request) -> Response:
        complaints = get_hostel_service().list_complaints(_status_filter(request))
        return Response(ComplaintSerializer(complaints, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = ComplaintCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        complaint = get_hostel_service().create_complaint(**serializer.validated_data)
        return Response(ComplaintSerializer(complaint).data, status=status.HTTP_201_CREATED)


class ComplaintDetailView(HostelAPIView):
    """Handler for PATCH /api/hostel/complaints/{complaint_id}"""

    def patch(self, request: Request, complaint_id: str) -> Response:
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        complaint = get_hostel_service().update_complaint_status(
            complaint_id,
            RequestStatus(serializer.validated_data["status"]),
            serializer.validated_data.get("admin_notes"),
        )
        return Response(ComplaintSerializer(complaint).data)
