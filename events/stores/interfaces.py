"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any

from events.domain import Event, EventDraft, EventId, Registration

# Fields update_event may change. Seat usage only moves through increment_seats.
UPDATABLE_EVENT_FIELDS = frozenset(
    {
        "name",
        "description",
        "speaker",
        "room_assignment",
        "date",
        "cost",
        "sponsorship",
        "estimated_cost",
        "sponsorship_amount",
    }
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft) -> Event:
        """Persist a new event with a fresh ID and no registered seats."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, **changes: Any) -> Event | None:
        """Apply changes to UPDATABLE_EVENT_FIELDS, or return None if not found.

        Raises:
            ValueError: If a field outside UPDATABLE_EVENT_FIELDS is given.
        """
        ...

    @abstractmethod
    def increment_seats(self, event_id: EventId) -> Event:
        """Take one seat if any is left, as a single compare-and-increment.

        Raises:
            EventNotFoundError: If the event does not exist.
            CapacityRaceLostError: If every seat is already taken.
        """
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Group writes so that they all persist or none do."""
        ...


class RegistrationStore(ABC):
    """Interface for registration persistence operations."""

    @abstractmethod
    def get_registration(self, event_id: EventId, user_id: str) -> Registration | None:
        """Return the user's registration for an event, or None."""
        ...

    @abstractmethod
    def add_registration(self, registration: Registration) -> Registration:
        """Persist a registration.

        Raises:
            DuplicateRegistrationError: If (event_id, user_id) is already registered.
        """
        ...

    @abstractmethod
    def list_registrations(self, event_id: EventId) -> list[Registration]:
        """Return registrations for an event ordered by registered_at ascending."""
        ...


def check_updatable(changes: dict[str, Any]) -> None:
    unknown = set(changes) - UPDATABLE_EVENT_FIELDS
    if unknown:
        raise ValueError(f"Cannot update event fields: {', '.join(sorted(unknown))}")
