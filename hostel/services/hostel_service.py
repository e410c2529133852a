"""Hostel service - room requests and complaints handled by the warden's desk.

Moving a request or complaint to Resolved or Rejected stamps resolved_at.
Admin notes are only replaced when new notes are given.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from hostel.domain import Complaint, HostelRoom, RequestStatus, RequestType, RoomRequest
from hostel.domain.errors import (
    ComplaintNotFoundError,
    InvalidIdError,
    InvalidRequestError,
    RequestNotFoundError,
    RoomNotFoundError,
)
from hostel.stores.interfaces import HostelStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_id(raw: str | UUID) -> UUID:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidIdError() from exc


class HostelService:
    """Service for hostel room, request and complaint operations."""

    def __init__(self, store: HostelStore, clock: Callable[[], datetime] = _utcnow) -> None:
        self._store = store
        self._clock = clock

    # --- Rooms ---

    def list_rooms(self) -> list[HostelRoom]:
        return self._store.list_rooms()

    def get_room(self, room_id: str | UUID) -> HostelRoom:
        room = self._store.get_room(_parse_id(room_id))
        if room is None:
            raise RoomNotFoundError(str(room_id))
        return room

    # --- Room requests ---

    def list_requests(self, status: RequestStatus | None = None) -> list[RoomRequest]:
        return self._store.list_requests(status)

    def create_request(
        self,
        *,
        user_id: str,
        request_type: RequestType,
        description: str,
        current_room_id: str | UUID | None = None,
        preferred_room_id: str | UUID | None = None,
    ) -> RoomRequest:
        """Open a room change or maintenance request in Pending status.

        Raises:
            InvalidRequestError: If the description is blank.
            RoomNotFoundError: If a referenced room does not exist.
        """
        description = description.strip()
        if not description:
            raise InvalidRequestError("Description cannot be empty.")

        request = RoomRequest(
            id=uuid4(),
            user_id=user_id,
            request_type=request_type,
            description=description,
            status=RequestStatus.PENDING,
            submitted_at=self._clock(),
            current_room_id=self._optional_room(current_room_id),
            preferred_room_id=self._optional_room(preferred_room_id),
        )
        created = self._store.add_request(request)
        logger.info("Created %s request %s for %s", request_type.value, created.id, user_id)
        return created

    def update_request_status(
        self, request_id: str | UUID, status: RequestStatus, admin_notes: str | None = None
    ) -> RoomRequest:
        request = self._store.update_request(
            _parse_id(request_id), **self._status_changes(status, admin_notes)
        )
        if request is None:
            raise RequestNotFoundError(str(request_id))
        logger.info("Updated room request %s status to %s", request.id, status.value)
        return request

    # --- Complaints ---

    def list_complaints(self, status: RequestStatus | None = None) -> list[Complaint]:
        return self._store.list_complaints(status)

    def create_complaint(
        self,
        *,
        user_id: str,
        category: str,
        description: str,
        room_id: str | UUID | None = None,
    ) -> Complaint:
        category = category.strip()
        description = description.strip()
        if not category or not description:
            raise InvalidRequestError("Category and description are required.")

        complaint = Complaint(
            id=uuid4(),
            user_id=user_id,
            category=category,
            description=description,
            status=RequestStatus.PENDING,
            submitted_at=self._clock(),
            room_id=self._optional_room(room_id),
        )
        created = self._store.add_complaint(complaint)
        logger.info("Created %s complaint %s for %s", category, created.id, user_id)
        return created

    def update_complaint_status(
        self, complaint_id: str | UUID, status: RequestStatus, admin_notes: str | None = None
    ) -> Complaint:
        complaint = self._store.update_complaint(
            _parse_id(complaint_id), **self._status_changes(status, admin_notes)
        )
        if complaint is None:
            raise ComplaintNotFoundError(str(complaint_id))
        logger.info("Updated complaint %s status to %s", complaint.id, status.value)
        return complaint

    def _status_changes(self, status: RequestStatus, admin_notes: str | None) -> dict[str, Any]:
        changes: dict[str, Any] = {"status": status}
        if admin_notes:
            changes["admin_notes"] = admin_notes
        if status.is_closed:
            changes["resolved_at"] = self._clock()
        return changes

    def _optional_room(self, room_id: str | UUID | None) -> UUID | None:
        if room_id is None or room_id == "":
            return None
        return self.get_room(room_id).id
