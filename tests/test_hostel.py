"""Tests for hostel rooms, room requests and complaints.

Run with: pytest tests/test_hostel.py -v
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from hostel import models as orm
from hostel.domain import RequestStatus, RequestType
from hostel.domain.errors import InvalidIdError, InvalidRequestError, RoomNotFoundError
from hostel.services.hostel_service import HostelService
from hostel.stores.django_store import DjangoHostelStore

FIXED_NOW = datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def room(db) -> orm.HostelRoom:
    return orm.HostelRoom.objects.create(room_number="101", block="A", capacity=2, occupants=["alice"])


@pytest.fixture
def hostel_service(db) -> HostelService:
    return HostelService(DjangoHostelStore(), clock=lambda: FIXED_NOW)


@pytest.mark.django_db
class TestHostelService:
    """Tests for HostelService."""

    def test_room_vacancy(self, hostel_service, room):
        fetched = hostel_service.get_room(str(room.id))
        assert fetched.occupants == ("alice",)
        assert fetched.has_vacancy

    def test_unknown_room(self, hostel_service):
        with pytest.raises(RoomNotFoundError):
            hostel_service.get_room(str(uuid4()))

    def test_invalid_room_id(self, hostel_service):
        with pytest.raises(InvalidIdError):
            hostel_service.get_room("room-101")

    def test_new_request_is_pending(self, hostel_service, room):
        request = hostel_service.create_request(
            user_id="alice",
            request_type=RequestType.MAINTENANCE,
            description="  Leaking tap ",
            current_room_id=str(room.id),
        )
        assert request.status == RequestStatus.PENDING
        assert request.description == "Leaking tap"
        assert request.current_room_id == room.id
        assert request.submitted_at == FIXED_NOW

    def test_request_with_unknown_room(self, hostel_service):
        with pytest.raises(RoomNotFoundError):
            hostel_service.create_request(
                user_id="alice",
                request_type=RequestType.CHANGE,
                description="Move me",
                preferred_room_id=str(uuid4()),
            )

    def test_blank_description_rejected(self, hostel_service):
        with pytest.raises(InvalidRequestError):
            hostel_service.create_request(
                user_id="alice", request_type=RequestType.CHANGE, description=" "
            )

    def test_closing_a_request_stamps_resolved_at(self, hostel_service):
        request = hostel_service.create_request(
            user_id="alice", request_type=RequestType.CHANGE, description="Too noisy"
        )

        in_progress = hostel_service.update_request_status(request.id, RequestStatus.IN_PROGRESS, "Checking")
        assert in_progress.resolved_at is None
        assert in_progress.admin_notes == "Checking"

        resolved = hostel_service.update_request_status(request.id, RequestStatus.RESOLVED)
        assert resolved.resolved_at == FIXED_NOW
        assert resolved.admin_notes == "Checking"

    def test_filter_requests_by_status(self, hostel_service):
        first = hostel_service.create_request(
            user_id="alice", request_type=RequestType.CHANGE, description="One"
        )
        hostel_service.create_request(user_id="bob", request_type=RequestType.CHANGE, description="Two")
        hostel_service.update_request_status(first.id, RequestStatus.REJECTED)

        rejected = hostel_service.list_requests(RequestStatus.REJECTED)

        assert [r.id for r in rejected] == [first.id]
        assert len(hostel_service.list_requests()) == 2

    def test_complaint_lifecycle(self, hostel_service, room):
        complaint = hostel_service.create_complaint(
            user_id="bob", category="Cleanliness", description="Corridor not swept", room_id=room.id
        )
        assert complaint.status == RequestStatus.PENDING

        closed = hostel_service.update_complaint_status(complaint.id, RequestStatus.RESOLVED, "Done")

        assert closed.resolved_at == FIXED_NOW
        assert closed.admin_notes == "Done"


@pytest.mark.django_db
class TestHostelEndpoints:
    """Tests for /api/hostel/*"""

    def test_list_rooms(self, api_client: APIClient, room):
        response = api_client.get("/api/hostel/rooms")
        assert response.status_code == 200
        assert response.data[0]["room_number"] == "101"
        assert response.data[0]["has_vacancy"] is True

    def test_room_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/hostel/rooms/{uuid4()}")
        assert response.status_code == 404

    def test_request_flow(self, api_client: APIClient, room):
        created = api_client.post(
            "/api/hostel/requests",
            {"user_id": "alice", "request_type": "Change", "description": "Quieter room", "preferred_room_id": str(room.id)},
            format="json",
        )
        assert created.status_code == 201
        assert created.data["status"] == "Pending"

        updated = api_client.patch(
            f"/api/hostel/requests/{created.data['id']}",
            {"status": "Resolved", "admin_notes": "Moved"},
            format="json",
        )

        assert updated.status_code == 200
        assert updated.data["status"] == "Resolved"
        assert updated.data["resolved_at"] is not None

    def test_status_filter(self, api_client: APIClient):
        api_client.post(
            "/api/hostel/complaints",
            {"user_id": "bob", "category": "Noise", "description": "Loud music"},
            format="json",
        )

        pending = api_client.get("/api/hostel/complaints", {"status": "Pending"})
        resolved = api_client.get("/api/hostel/complaints", {"status": "Resolved"})

        assert len(pending.data) == 1
        assert resolved.data == []

    def test_invalid_status_filter(self, api_client: APIClient):
        response = api_client.get("/api/hostel/requests", {"status": "Lost"})
        assert response.status_code == 400

    def test_unknown_complaint(self, api_client: APIClient):
        response = api_client.patch(
            f"/api/hostel/complaints/{uuid4()}", {"status": "Resolved"}, format="json"
        )
        assert response.status_code == 404
        assert response.data["error"]["code"] == "COMPLAINT_NOT_FOUND"
