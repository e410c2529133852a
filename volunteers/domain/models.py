"""Domain models for volunteers and their event assignments."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Self
from uuid import UUID

from events.domain import EventId


@dataclass(frozen=True)
class VolunteerId:
    """Unique identifier for a Volunteer."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Volunteer:
    """Domain representation of a Volunteer.

    attendance and tasks are keyed by assigned event; an event with no
    recorded attendance or task is simply absent from the mapping.
    """

    id: VolunteerId
    name: str
    email: str
    assigned_event_ids: tuple[EventId, ...] = ()
    attendance: Mapping[EventId, bool] = field(default_factory=dict)
    tasks: Mapping[EventId, str] = field(default_factory=dict)

    def is_assigned_to(self, event_id: EventId) -> bool:
        return event_id in self.assigned_event_ids
