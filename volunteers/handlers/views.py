"""HTTP handlers (views) for volunteer management."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from eduevent.handlers import DomainAPIView
from events.handlers.views import ERROR_STATUSES as EVENT_ERROR_STATUSES
from volunteers.dependencies import get_volunteer_service
from volunteers.domain.errors import ErrorCode
from volunteers.handlers.serializers import (
    AttendanceSerializer,
    TaskSerializer,
    VolunteerCreateSerializer,
    VolunteerSerializer,
)

ERROR_STATUSES = {
    **EVENT_ERROR_STATUSES,
    ErrorCode.INVALID_VOLUNTEER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_VOLUNTEER_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VOLUNTEER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_ASSIGNED: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_ASSIGNED: status.HTTP_409_CONFLICT,
}


class VolunteerAPIView(DomainAPIView):
    error_statuses = ERROR_STATUSES


class VolunteerListView(VolunteerAPIView):
    """Handler for GET/POST /api/volunteers"""

    def get(self, request: Request) -> Response:
        volunteers = get_volunteer_service().list_volunteers()
        return Response(VolunteerSerializer(volunteers, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = VolunteerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        volunteer = get_volunteer_service().create_volunteer(**serializer.validated_data)
        return Response(VolunteerSerializer(volunteer).data, status=status.HTTP_201_CREATED)


class VolunteerDetailView(VolunteerAPIView):
    """Handler for GET /api/volunteers/{volunteer_id}"""

    def get(self, request: Request, volunteer_id: str) -> Response:
        volunteer = get_volunteer_service().get_volunteer(volunteer_id)
        return Response(VolunteerSerializer(volunteer).data)


class VolunteerAssignmentView(VolunteerAPIView):
    """Handler for POST/DELETE /api/volunteers/{volunteer_id}/events/{event_id}"""

    def post(self, request: Request, volunteer_id: str, event_id: str) -> Response:
        volunteer = get_volunteer_service().assign(volunteer_id, event_id)
        return Response(VolunteerSerializer(volunteer).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request, volunteer_id: str, event_id: str) -> Response:
        volunteer = get_volunteer_service().unassign(volunteer_id, event_id)
        return Response(VolunteerSerializer(volunteer).data)


class VolunteerAttendanceView(VolunteerAPIView):
    """Handler for PUT /api/volunteers/{volunteer_id}/events/{event_id}/attendance"""

    def put(self, request: Request, volunteer_id: str, event_id: str) -> Response:
        serializer = AttendanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        volunteer = get_volunteer_service().track_attendance(
            volunteer_id, event_id, serializer.validated_data["attended"]
        )
        return Response(VolunteerSerializer(volunteer).data)


class VolunteerTaskView(VolunteerAPIView):
    """Handler for PUT /api/volunteers/{volunteer_id}/events/{event_id}/task"""

    def put(self, request: Request, volunteer_id: str, event_id: str) -> Response:
        serializer = TaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        volunteer = get_volunteer_service().assign_task(
            volunteer_id, event_id, serializer.validated_data["task"]
        )
        return Response(VolunteerSerializer(volunteer).data)


class EventVolunteerListView(VolunteerAPIView):
    """Handler for GET /api/events/{event_id}/volunteers"""

    def get(self, request: Request, event_id: str) -> Response:
        volunteers = get_volunteer_service().list_for_event(event_id)
        return Response(VolunteerSerializer(volunteers, many=True).data)
