"""Volunteer service - all business logic lives here.

Assignments are owned by the volunteer side; events are only read, through
the EventStore, to confirm they exist.
"""

import logging

from events.services.event_service import load_event
from events.stores.interfaces import EventStore
from volunteers.domain import Volunteer, VolunteerId
from volunteers.domain.errors import (
    AlreadyAssignedError,
    InvalidVolunteerDataError,
    InvalidVolunteerIdError,
    NotAssignedError,
    VolunteerNotFoundError,
)
from volunteers.stores.interfaces import VolunteerStore

logger = logging.getLogger(__name__)


def parse_volunteer_id(volunteer_id: str) -> VolunteerId:
    try:
        return VolunteerId.from_string(volunteer_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidVolunteerIdError() from exc


class VolunteerService:
    """Service for volunteer management operations."""

    def __init__(self, store: VolunteerStore, events: EventStore) -> None:
        self._store = store
        self._events = events

    def list_volunteers(self) -> list[Volunteer]:
        return self._store.list_volunteers()

    def list_for_event(self, event_id: str) -> list[Volunteer]:
        """Return volunteers assigned to an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = load_event(self._events, event_id)
        return self._store.list_for_event(event.id)

    def get_volunteer(self, volunteer_id: str) -> Volunteer:
        """Return a volunteer by ID.

        Raises:
            InvalidVolunteerIdError: If the volunteer_id is not a valid UUID.
            VolunteerNotFoundError: If the volunteer does not exist.
        """
        volunteer = self._store.get_volunteer(parse_volunteer_id(volunteer_id))
        if volunteer is None:
            raise VolunteerNotFoundError(volunteer_id)
        return volunteer

    def create_volunteer(self, name: str, email: str) -> Volunteer:
        name = name.strip()
        if not name:
            raise InvalidVolunteerDataError("Volunteer name cannot be empty.")
        volunteer = self._store.create_volunteer(name, email.strip())
        logger.info("Created volunteer %s (%s)", volunteer.id, volunteer.name)
        return volunteer

    def assign(self, volunteer_id: str, event_id: str) -> Volunteer:
        """Assign a volunteer to an event.

        Raises:
            VolunteerNotFoundError, EventNotFoundError: If either is missing.
            AlreadyAssignedError: If the assignment already exists.
        """
        volunteer = self.get_volunteer(volunteer_id)
        event = load_event(self._events, event_id)
        if not self._store.add_assignment(volunteer.id, event.id):
            raise AlreadyAssignedError(volunteer_id, event_id)
        logger.info("Assigned volunteer %s to event %s", volunteer.id, event.id)
        return self.get_volunteer(volunteer_id)

    def unassign(self, volunteer_id: str, event_id: str) -> Volunteer:
        """Remove a volunteer from an event, dropping attendance and task.

        Raises:
            VolunteerNotFoundError: If the volunteer is missing.
            NotAssignedError: If the volunteer is not assigned to the event.
        """
        volunteer = self.get_volunteer(volunteer_id)
        event = load_event(self._events, event_id)
        if not self._store.remove_assignment(volunteer.id, event.id):
            raise NotAssignedError(volunteer_id, event_id)
        logger.info("Removed volunteer %s from event %s", volunteer.id, event.id)
        return self.get_volunteer(volunteer_id)

    def track_attendance(self, volunteer_id: str, event_id: str, attended: bool) -> Volunteer:
        volunteer = self.get_volunteer(volunteer_id)
        event = load_event(self._events, event_id)
        if not self._store.set_attendance(volunteer.id, event.id, attended):
            raise NotAssignedError(volunteer_id, event_id)
        logger.info("Attendance of volunteer %s at event %s: %s", volunteer.id, event.id, attended)
        return self.get_volunteer(volunteer_id)

    def assign_task(self, volunteer_id: str, event_id: str, task: str) -> Volunteer:
        volunteer = self.get_volunteer(volunteer_id)
        event = load_event(self._events, event_id)
        task = task.strip()
        if not task:
            raise InvalidVolunteerDataError("Task cannot be empty.")
        if not self._store.set_task(volunteer.id, event.id, task):
            raise NotAssignedError(volunteer_id, event_id)
        logger.info('Assigned task "%s" to volunteer %s for event %s', task, volunteer.id, event.id)
        return self.get_volunteer(volunteer_id)
