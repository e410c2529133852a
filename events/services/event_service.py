"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import datetime
from decimal import Decimal

from events.domain import Capacity, EventDraft, EventId, Money
from events.domain.errors import EventNotFoundError, InvalidEventDataError, InvalidEventIdError
from events.domain.models import Event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    """Parse a raw event ID.

    Raises:
        InvalidEventIdError: If the event_id is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def load_event(store: EventStore, event_id: str) -> Event:
    """Return an event by raw ID.

    Raises:
        InvalidEventIdError: If the event_id is not a valid UUID.
        EventNotFoundError: If the event does not exist.
    """
    event = store.get_event(parse_event_id(event_id))
    if event is None:
        raise EventNotFoundError(event_id)
    return event


def _money(amount: Decimal | None, field: str) -> Money | None:
    if amount is None:
        return None
    try:
        return Money(Decimal(amount))
    except ValueError as exc:
        raise InvalidEventDataError(f"{field} cannot be negative.") from exc


class EventService:
    """Service for event catalog and administration operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        return load_event(self._store, event_id)

    def create_event(
        self,
        *,
        name: str,
        description: str,
        speaker: str,
        room_assignment: str,
        date: datetime,
        total_seats: int,
        cost: Decimal = Decimal("0"),
        sponsorship: str | None = None,
        estimated_cost: Decimal | None = None,
        sponsorship_amount: Decimal | None = None,
    ) -> Event:
        """Create an event with no registered seats.

        Raises:
            InvalidEventDataError: If the name is blank, there are no seats,
                or an amount is negative.
        """
        name = name.strip()
        if not name:
            raise InvalidEventDataError("Event name cannot be empty.")
        if total_seats < 1:
            raise InvalidEventDataError("An event needs at least one seat.")

        draft = EventDraft(
            name=name,
            description=description,
            speaker=speaker,
            room_assignment=room_assignment,
            date=date,
            total_seats=Capacity(total_seats),
            cost=_money(cost, "cost") or Money.zero(),
            sponsorship=sponsorship or None,
            estimated_cost=_money(estimated_cost, "estimated_cost"),
            sponsorship_amount=_money(sponsorship_amount, "sponsorship_amount"),
        )
        event = self._store.create_event(draft)
        logger.info("Created event %s (%s) with %d seats", event.id, event.name, total_seats)
        return event

    def update_financials(
        self,
        event_id: str,
        *,
        estimated_cost: Decimal | None = None,
        sponsorship_amount: Decimal | None = None,
    ) -> Event:
        """Update the estimated cost and/or sponsorship amount of an event.

        Only the amounts that are given change.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidEventDataError: If an amount is negative.
        """
        changes = {}
        if estimated_cost is not None:
            changes["estimated_cost"] = _money(estimated_cost, "estimated_cost")
        if sponsorship_amount is not None:
            changes["sponsorship_amount"] = _money(sponsorship_amount, "sponsorship_amount")

        event = self._store.update_event(parse_event_id(event_id), **changes)
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated financials for event %s: %s", event.id, sorted(changes))
        return event
