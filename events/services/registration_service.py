"""Registration service: seat accounting for event sign-ups.

The seat counter only moves through EventStore.increment_seats, which is a
compare-and-increment, so at most total_seats registrations can succeed no
matter how requests interleave. The fullness check before it exists only to
give a fast answer.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from uuid import uuid4

from events.domain import Registration, RegistrationId
from events.domain.errors import DuplicateRegistrationError, EventFullError
from events.services.event_service import load_event
from events.services.tokens import generate_token
from events.stores.interfaces import EventStore, RegistrationStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegistrationService:
    """Service for registering users to events."""

    def __init__(
        self,
        events: EventStore,
        registrations: RegistrationStore,
        token_factory: Callable[[], str] = generate_token,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._events = events
        self._registrations = registrations
        self._token_factory = token_factory
        self._clock = clock

    def register(self, event_id: str, user_id: str, document_url: str | None = None) -> Registration:
        """Register a user for an event and take one seat.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            EventFullError: If no seat is left.
            CapacityRaceLostError: If the last seat went to a concurrent request.
            DuplicateRegistrationError: If the user is already registered.
        """
        event = load_event(self._events, event_id)
        if event.is_full:
            logger.info("Rejected registration of %s: event %s is full", user_id, event.id)
            raise EventFullError(event_id)

        with self._events.atomic():
            if self._registrations.get_registration(event.id, user_id) is not None:
                logger.info("Rejected duplicate registration of %s for event %s", user_id, event.id)
                raise DuplicateRegistrationError(event_id, user_id)

            self._events.increment_seats(event.id)
            registration = self._registrations.add_registration(
                Registration(
                    id=RegistrationId(uuid4()),
                    event_id=event.id,
                    user_id=user_id,
                    registered_at=self._clock(),
                    token=self._token_factory(),
                    document_url=document_url,
                )
            )

        logger.info("Registered %s for event %s", user_id, event.id)
        return registration

    def list_registrations(self, event_id: str) -> list[Registration]:
        """Return the registrations of an event, oldest first.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = load_event(self._events, event_id)
        return self._registrations.list_registrations(event.id)
