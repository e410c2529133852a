"""Participation certificates for registered attendees."""

import logging

from events.domain.errors import NotRegisteredError
from events.services.event_service import load_event
from events.stores.interfaces import EventStore, RegistrationStore

logger = logging.getLogger(__name__)

ISSUER = "EduEvent Hub"

_RULE = "-" * 40


class CertificateService:
    """Renders plain-text certificates of participation."""

    def __init__(self, events: EventStore, registrations: RegistrationStore) -> None:
        self._events = events
        self._registrations = registrations

    def generate(self, event_id: str, user_id: str, participant_name: str) -> str:
        """Return the certificate text for a registered user.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotRegisteredError: If the user never registered for the event.
        """
        event = load_event(self._events, event_id)
        if self._registrations.get_registration(event.id, user_id) is None:
            raise NotRegisteredError(event_id, user_id)

        lines = [
            _RULE,
            "CERTIFICATE OF PARTICIPATION",
            _RULE,
            "",
            "This certifies that",
            participant_name.strip(),
            "",
            "Successfully participated in the event",
            f'"{event.name}"',
            "",
            f"Held on: {event.date:%d %B %Y}",
            "",
            f"Issued by: {ISSUER}",
            _RULE,
        ]
        logger.info("Generated certificate for %s at event %s", user_id, event.id)
        return "\n".join(lines) + "\n"
