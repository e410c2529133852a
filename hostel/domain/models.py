"""Domain models for hostel rooms, room requests and complaints."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class RequestStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    REJECTED = "Rejected"

    @property
    def is_closed(self) -> bool:
        return self in (RequestStatus.RESOLVED, RequestStatus.REJECTED)


class RequestType(str, Enum):
    CHANGE = "Change"
    MAINTENANCE = "Maintenance"


@dataclass(frozen=True)
class HostelRoom:
    id: UUID
    room_number: str
    block: str
    capacity: int
    occupants: tuple[str, ...]

    @property
    def has_vacancy(self) -> bool:
        return len(self.occupants) < self.capacity


@dataclass(frozen=True)
class RoomRequest:
    """A student's request to change room or to get maintenance done."""

    id: UUID
    user_id: str
    request_type: RequestType
    description: str
    status: RequestStatus
    submitted_at: datetime
    current_room_id: UUID | None = None
    preferred_room_id: UUID | None = None
    resolved_at: datetime | None = None
    admin_notes: str | None = None


@dataclass(frozen=True)
class Complaint:
    id: UUID
    user_id: str
    category: str
    description: str
    status: RequestStatus
    submitted_at: datetime
    room_id: UUID | None = None
    resolved_at: datetime | None = None
    admin_notes: str | None = None
