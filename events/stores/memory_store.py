"""In-process implementations of the event stores.

Used by tests and by callers that embed the services without a database.
Domain models are frozen, so handing them out never exposes shared state.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from events.domain import Event, EventDraft, EventId, Registration
from events.domain.errors import (
    CapacityRaceLostError,
    DuplicateRegistrationError,
    EventNotFoundError,
)
from events.stores.interfaces import EventStore, RegistrationStore, check_updatable


class InMemoryEventStore(EventStore):
    """Dict-backed event store guarded by a re-entrant lock."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self._lock = threading.RLock()
        self._events: dict[EventId, Event] = {event.id: event for event in events or []}

    def list_events(self) -> list[Event]:
        with self._lock:
            return sorted(self._events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def create_event(self, draft: EventDraft) -> Event:
        now = datetime.now(timezone.utc)
        event = Event(
            id=EventId(uuid4()),
            name=draft.name,
            description=draft.description,
            speaker=draft.speaker,
            room_assignment=draft.room_assignment,
            date=draft.date,
            total_seats=draft.total_seats,
            registered_seats=0,
            cost=draft.cost,
            sponsorship=draft.sponsorship,
            estimated_cost=draft.estimated_cost,
            sponsorship_amount=draft.sponsorship_amount,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._events[event.id] = event
        return event

    def update_event(self, event_id: EventId, **changes: Any) -> Event | None:
        check_updatable(changes)
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                return None
            updated = replace(event, **changes, updated_at=datetime.now(timezone.utc))
            self._events[event_id] = updated
            return updated

    def increment_seats(self, event_id: EventId) -> Event:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFoundError(str(event_id))
            if event.is_full:
                raise CapacityRaceLostError(str(event_id))
            updated = replace(
                event,
                registered_seats=event.registered_seats + 1,
                updated_at=datetime.now(timezone.utc),
            )
            self._events[event_id] = updated
            return updated

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            snapshot = dict(self._events)
            try:
                yield
            except BaseException:
                self._events = snapshot
                raise


class InMemoryRegistrationStore(RegistrationStore):
    """Dict-backed registration store keyed by (event, user)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registrations: dict[tuple[EventId, str], Registration] = {}

    def get_registration(self, event_id: EventId, user_id: str) -> Registration | None:
        with self._lock:
            return self._registrations.get((event_id, user_id))

    def add_registration(self, registration: Registration) -> Registration:
        key = (registration.event_id, registration.user_id)
        with self._lock:
            if key in self._registrations:
                raise DuplicateRegistrationError(str(registration.event_id), registration.user_id)
            self._registrations[key] = registration
        return registration

    def list_registrations(self, event_id: EventId) -> list[Registration]:
        with self._lock:
            matching = [r for r in self._registrations.values() if r.event_id == event_id]
        return sorted(matching, key=lambda r: r.registered_at)
