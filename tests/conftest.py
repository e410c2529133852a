"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.services.event_service import EventService
from events.services.registration_service import RegistrationService
from events.stores.memory_store import InMemoryEventStore, InMemoryRegistrationStore

EVENT_DATE = datetime(2025, 3, 14, 10, 0, tzinfo=timezone.utc)


def event_fields(**overrides) -> dict:
    fields = {
        "name": "Intro to Compilers",
        "description": "A gentle walk through parsing and code generation.",
        "speaker": "Dr. Rao",
        "room_assignment": "Hall B",
        "date": EVENT_DATE,
        "total_seats": 3,
        "cost": Decimal("0"),
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def registration_store() -> InMemoryRegistrationStore:
    return InMemoryRegistrationStore()


@pytest.fixture
def event_service(event_store) -> EventService:
    return EventService(event_store)


@pytest.fixture
def registration_service(event_store, registration_store) -> RegistrationService:
    return RegistrationService(event_store, registration_store)


@pytest.fixture
def make_event(event_service):
    """Create an event in the in-memory store."""

    def _make(**overrides):
        return event_service.create_event(**event_fields(**overrides))

    return _make


@pytest.fixture
def make_db_event(db):
    """Create an event in the database."""
    from events.dependencies import get_event_service

    def _make(**overrides):
        return get_event_service().create_event(**event_fields(**overrides))

    return _make
