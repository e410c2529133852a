"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import EventId
from volunteers.domain import Volunteer, VolunteerId


class VolunteerStore(ABC):
    """Interface for volunteer persistence operations."""

    @abstractmethod
    def list_volunteers(self) -> list[Volunteer]:
        """Return all volunteers ordered by name."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[Volunteer]:
        """Return volunteers assigned to an event."""
        ...

    @abstractmethod
    def get_volunteer(self, volunteer_id: VolunteerId) -> Volunteer | None:
        """Return a volunteer by ID, or None if not found."""
        ...

    @abstractmethod
    def create_volunteer(self, name: str, email: str) -> Volunteer:
        """Persist a new volunteer with no assignments."""
        ...

    @abstractmethod
    def add_assignment(self, volunteer_id: VolunteerId, event_id: EventId) -> bool:
        """Assign a volunteer to an event. Return False if already assigned."""
        ...

    @abstractmethod
    def remove_assignment(self, volunteer_id: VolunteerId, event_id: EventId) -> bool:
        """Drop an assignment with its attendance and task. Return False if absent."""
        ...

    @abstractmethod
    def set_attendance(self, volunteer_id: VolunteerId, event_id: EventId, attended: bool) -> bool:
        """Record attendance. Return False if the volunteer is not assigned."""
        ...

    @abstractmethod
    def set_task(self, volunteer_id: VolunteerId, event_id: EventId, task: str) -> bool:
        """Record the volunteer's task. Return False if the volunteer is not assigned."""
        ...
