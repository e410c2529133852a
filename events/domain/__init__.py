from events.domain.models import Event, EventDraft, Registration
from events.domain.value_objects import Capacity, EventId, Money, RegistrationId

__all__ = [
    "Event",
    "EventDraft",
    "Registration",
    "EventId",
    "RegistrationId",
    "Money",
    "Capacity",
]
