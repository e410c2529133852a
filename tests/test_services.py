"""Unit tests for EventService.

These test validation and domain error mapping against the in-memory store.
Run with: pytest tests/test_services.py -v
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from events.domain.errors import (
    ErrorCode,
    EventNotFoundError,
    InvalidEventDataError,
    InvalidEventIdError,
)
from tests.conftest import event_fields


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_service):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError) as exc_info:
            event_service.get_event("not-a-uuid")
        assert exc_info.value.code == ErrorCode.INVALID_EVENT_ID

    def test_get_event_not_found_raises_error(self, event_service):
        """get_event raises EventNotFoundError when store returns None."""
        missing = str(uuid4())
        with pytest.raises(EventNotFoundError) as exc_info:
            event_service.get_event(missing)
        assert exc_info.value.event_id == missing

    def test_get_event_returns_created_event(self, event_service, make_event):
        event = make_event()
        assert event_service.get_event(str(event.id)) == event

    def test_list_events_returns_all(self, event_service, make_event):
        first = make_event(name="First")
        second = make_event(name="Second")
        assert {e.id for e in event_service.list_events()} == {first.id, second.id}


class TestCreateEvent:
    """Tests for EventService.create_event."""

    def test_new_event_has_no_registered_seats(self, make_event):
        event = make_event(total_seats=25, cost=Decimal("150.00"))
        assert event.registered_seats == 0
        assert event.total_seats.value == 25
        assert event.cost.amount == Decimal("150.00")
        assert event.estimated_cost is None

    def test_name_is_trimmed(self, make_event):
        assert make_event(name="  Robotics Lab  ").name == "Robotics Lab"

    def test_blank_name_rejected(self, event_service):
        with pytest.raises(InvalidEventDataError):
            event_service.create_event(**event_fields(name="   "))

    def test_zero_seats_rejected(self, event_service):
        with pytest.raises(InvalidEventDataError):
            event_service.create_event(**event_fields(total_seats=0))

    def test_negative_cost_rejected(self, event_service):
        with pytest.raises(InvalidEventDataError):
            event_service.create_event(**event_fields(cost=Decimal("-5")))

    def test_blank_sponsorship_stored_as_none(self, make_event):
        assert make_event(sponsorship="").sponsorship is None


class TestUpdateFinancials:
    """Tests for EventService.update_financials."""

    def test_updates_only_given_amounts(self, event_service, make_event):
        event = make_event(estimated_cost=Decimal("500"), sponsorship_amount=Decimal("200"))
        updated = event_service.update_financials(str(event.id), sponsorship_amount=Decimal("350"))
        assert updated.sponsorship_amount.amount == Decimal("350")
        assert updated.estimated_cost.amount == Decimal("500")

    def test_seat_counts_untouched(self, event_service, make_event):
        event = make_event(total_seats=4)
        updated = event_service.update_financials(str(event.id), estimated_cost=Decimal("10"))
        assert updated.total_seats == event.total_seats
        assert updated.registered_seats == event.registered_seats

    def test_negative_amount_rejected(self, event_service, make_event):
        event = make_event()
        with pytest.raises(InvalidEventDataError):
            event_service.update_financials(str(event.id), estimated_cost=Decimal("-1"))

    def test_unknown_event(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.update_financials(str(uuid4()), estimated_cost=Decimal("1"))
