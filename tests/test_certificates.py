"""Tests for participation certificates.

Run with: pytest tests/test_certificates.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from events.domain.errors import EventNotFoundError, NotRegisteredError
from events.services.certificate_service import CertificateService


@pytest.fixture
def certificate_service(event_store, registration_store) -> CertificateService:
    return CertificateService(event_store, registration_store)


class TestCertificateService:
    """Tests for CertificateService.generate."""

    def test_certificate_text(self, certificate_service, registration_service, make_event):
        event = make_event(name="Intro to Compilers")
        registration_service.register(str(event.id), "alice")

        text = certificate_service.generate(str(event.id), "alice", "  Alice Menon ")

        assert "CERTIFICATE OF PARTICIPATION" in text
        assert "\nAlice Menon\n" in text
        assert '"Intro to Compilers"' in text
        assert "Held on: 14 March 2025" in text
        assert "Issued by: EduEvent Hub" in text

    def test_requires_registration(self, certificate_service, make_event):
        event = make_event()
        with pytest.raises(NotRegisteredError):
            certificate_service.generate(str(event.id), "mallory", "Mallory")

    def test_unknown_event(self, certificate_service):
        with pytest.raises(EventNotFoundError):
            certificate_service.generate(str(uuid4()), "alice", "Alice")


@pytest.mark.django_db
class TestCertificateEndpoint:
    """Tests for POST /api/events/{id}/certificate"""

    def test_issue_certificate(self, api_client: APIClient, make_db_event):
        event = make_db_event(name="Robotics Lab")
        api_client.post(f"/api/events/{event.id}/registrations", {"user_id": "alice"}, format="json")

        response = api_client.post(
            f"/api/events/{event.id}/certificate",
            {"user_id": "alice", "participant_name": "Alice Menon"},
            format="json",
        )

        assert response.status_code == 200
        assert '"Robotics Lab"' in response.data["certificate"]

    def test_not_registered(self, api_client: APIClient, make_db_event):
        event = make_db_event()
        response = api_client.post(
            f"/api/events/{event.id}/certificate",
            {"user_id": "bob", "participant_name": "Bob"},
            format="json",
        )
        assert response.status_code == 409
        assert response.data["error"]["code"] == "NOT_REGISTERED"
