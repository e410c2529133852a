"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from hostel.domain import Complaint, HostelRoom, RequestStatus, RoomRequest


class HostelStore(ABC):
    """Interface for hostel persistence operations."""

    @abstractmethod
    def list_rooms(self) -> list[HostelRoom]:
        """Return all rooms ordered by block and room number."""
        ...

    @abstractmethod
    def get_room(self, room_id: UUID) -> HostelRoom | None:
        ...

    @abstractmethod
    def list_requests(self, status: RequestStatus | None = None) -> list[RoomRequest]:
        """Return room requests, newest first, optionally filtered by status."""
        ...

    @abstractmethod
    def add_request(self, request: RoomRequest) -> RoomRequest:
        ...

    @abstractmethod
    def update_request(self, request_id: UUID, **changes: Any) -> RoomRequest | None:
        """Apply status/resolved_at/admin_notes changes, or return None if not found."""
        ...

    @abstractmethod
    def list_complaints(self, status: RequestStatus | None = None) -> list[Complaint]:
        """Return complaints, newest first, optionally filtered by status."""
        ...

    @abstractmethod
    def add_complaint(self, complaint: Complaint) -> Complaint:
        ...

    @abstractmethod
    def update_complaint(self, complaint_id: UUID, **changes: Any) -> Complaint | None:
        """Apply status/resolved_at/admin_notes changes, or return None if not found."""
        ...
