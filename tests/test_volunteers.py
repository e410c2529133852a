"""Integration tests for volunteer management.

Run with: pytest tests/test_volunteers.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from volunteers.models import VolunteerAssignment


@pytest.fixture
def volunteer(api_client: APIClient, db) -> dict:
    response = api_client.post(
        "/api/volunteers", {"name": "Priya Nair", "email": "priya@example.edu"}, format="json"
    )
    assert response.status_code == 201
    return response.data


@pytest.mark.django_db
class TestVolunteerList:
    """Tests for GET/POST /api/volunteers"""

    def test_create_volunteer(self, volunteer):
        assert volunteer["name"] == "Priya Nair"
        assert volunteer["assigned_event_ids"] == []
        assert volunteer["attendance"] == {}
        assert volunteer["tasks"] == {}

    def test_blank_name_rejected(self, api_client: APIClient):
        response = api_client.post(
            "/api/volunteers", {"name": "  ", "email": "x@example.edu"}, format="json"
        )
        assert response.status_code == 400

    def test_list(self, api_client: APIClient, volunteer):
        response = api_client.get("/api/volunteers")
        assert [v["id"] for v in response.data] == [volunteer["id"]]

    def test_detail_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/volunteers/{uuid4()}")
        assert response.status_code == 404
        assert response.data["error"]["code"] == "VOLUNTEER_NOT_FOUND"

    def test_detail_invalid_id(self, api_client: APIClient):
        response = api_client.get("/api/volunteers/abc")
        assert response.status_code == 400


@pytest.mark.django_db
class TestVolunteerAssignment:
    """Tests for assignment, attendance and task endpoints."""

    def test_assign_and_list_for_event(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event()
        url = f"/api/volunteers/{volunteer['id']}/events/{event.id}"

        response = api_client.post(url)

        assert response.status_code == 201
        assert response.data["assigned_event_ids"] == [str(event.id)]
        listed = api_client.get(f"/api/events/{event.id}/volunteers")
        assert [v["id"] for v in listed.data] == [volunteer["id"]]

    def test_assign_twice(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event()
        url = f"/api/volunteers/{volunteer['id']}/events/{event.id}"
        api_client.post(url)

        response = api_client.post(url)

        assert response.status_code == 409
        assert response.data["error"]["code"] == "ALREADY_ASSIGNED"

    def test_assign_unknown_event(self, api_client: APIClient, volunteer):
        response = api_client.post(f"/api/volunteers/{volunteer['id']}/events/{uuid4()}")
        assert response.status_code == 404
        assert response.data["error"]["code"] == "EVENT_NOT_FOUND"

    def test_attendance_and_task(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event()
        base = f"/api/volunteers/{volunteer['id']}/events/{event.id}"
        api_client.post(base)

        api_client.put(f"{base}/attendance", {"attended": True}, format="json")
        response = api_client.put(f"{base}/task", {"task": "  Registration desk "}, format="json")

        assert response.status_code == 200
        assert response.data["attendance"] == {str(event.id): True}
        assert response.data["tasks"] == {str(event.id): "Registration desk"}

    def test_attendance_requires_assignment(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event()
        response = api_client.put(
            f"/api/volunteers/{volunteer['id']}/events/{event.id}/attendance",
            {"attended": False},
            format="json",
        )
        assert response.status_code == 409
        assert response.data["error"]["code"] == "NOT_ASSIGNED"

    def test_unassign_drops_attendance_and_task(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event()
        base = f"/api/volunteers/{volunteer['id']}/events/{event.id}"
        api_client.post(base)
        api_client.put(f"{base}/task", {"task": "Stage"}, format="json")

        response = api_client.delete(base)

        assert response.status_code == 200
        assert response.data["assigned_event_ids"] == []
        assert response.data["tasks"] == {}
        assert not VolunteerAssignment.objects.exists()

    def test_unassign_when_not_assigned(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event()
        response = api_client.delete(f"/api/volunteers/{volunteer['id']}/events/{event.id}")
        assert response.status_code == 409

    def test_assignment_does_not_touch_seats(self, api_client: APIClient, volunteer, make_db_event):
        event = make_db_event(total_seats=1)
        api_client.post(f"/api/volunteers/{volunteer['id']}/events/{event.id}")

        response = api_client.get(f"/api/events/{event.id}")

        assert response.data["registered_seats"] == 0
