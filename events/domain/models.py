"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import Capacity, EventId, Money, RegistrationId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    speaker: str
    room_assignment: str
    date: datetime
    total_seats: Capacity
    registered_seats: int
    cost: Money
    sponsorship: str | None
    estimated_cost: Money | None
    sponsorship_amount: Money | None
    created_at: datetime
    updated_at: datetime

    @property
    def seats_available(self) -> int:
        return self.total_seats.remaining(self.registered_seats)

    @property
    def is_full(self) -> bool:
        return self.seats_available == 0


@dataclass(frozen=True)
class EventDraft:
    """Fields supplied by an administrator when creating an Event."""

    name: str
    description: str
    speaker: str
    room_assignment: str
    date: datetime
    total_seats: Capacity
    cost: Money
    sponsorship: str | None = None
    estimated_cost: Money | None = None
    sponsorship_amount: Money | None = None


@dataclass(frozen=True)
class Registration:
    """Domain representation of a Registration.

    The token is the registrant's proof of registration.
    """

    id: RegistrationId
    event_id: EventId
    user_id: str
    registered_at: datetime
    token: str
    document_url: str | None = None
