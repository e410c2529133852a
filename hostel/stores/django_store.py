"""Django ORM implementation of the HostelStore."""

from typing import Any
from uuid import UUID

from hostel import models as orm
from hostel.domain import Complaint, HostelRoom, RequestStatus, RequestType, RoomRequest
from hostel.stores.interfaces import HostelStore


def to_domain_room(row: orm.HostelRoom) -> HostelRoom:
    return HostelRoom(
        id=row.id,
        room_number=row.room_number,
        block=row.block,
        capacity=row.capacity,
        occupants=tuple(row.occupants),
    )


def to_domain_request(row: orm.RoomRequest) -> RoomRequest:
    return RoomRequest(
        id=row.id,
        user_id=row.user_id,
        request_type=RequestType(row.request_type),
        description=row.description,
        status=RequestStatus(row.status),
        submitted_at=row.submitted_at,
        current_room_id=row.current_room_id,
        preferred_room_id=row.preferred_room_id,
        resolved_at=row.resolved_at,
        admin_notes=row.admin_notes,
    )


def to_domain_complaint(row: orm.Complaint) -> Complaint:
    return Complaint(
        id=row.id,
        user_id=row.user_id,
        category=row.category,
        description=row.description,
        status=RequestStatus(row.status),
        submitted_at=row.submitted_at,
        room_id=row.room_id,
        resolved_at=row.resolved_at,
        admin_notes=row.admin_notes,
    )


def _persisted(changes: dict[str, Any]) -> dict[str, Any]:
    return {
        field: value.value if isinstance(value, RequestStatus) else value
        for field, value in changes.items()
    }


class DjangoHostelStore(HostelStore):
    """Database-backed hostel store using Django ORM."""

    def list_rooms(self) -> list[HostelRoom]:
        return [to_domain_room(row) for row in orm.HostelRoom.objects.all()]

    def get_room(self, room_id: UUID) -> HostelRoom | None:
        row = orm.HostelRoom.objects.filter(pk=room_id).first()
        return to_domain_room(row) if row is not None else None

    def list_requests(self, status: RequestStatus | None = None) -> list[RoomRequest]:
        rows = orm.RoomRequest.objects.all()
        if status is not None:
            rows = rows.filter(status=status.value)
        return [to_domain_request(row) for row in rows]

    def add_request(self, request: RoomRequest) -> RoomRequest:
        row = orm.RoomRequest.objects.create(
            id=request.id,
            user_id=request.user_id,
            request_type=request.request_type.value,
            current_room_id=request.current_room_id,
            preferred_room_id=request.preferred_room_id,
            description=request.description,
            status=request.status.value,
            submitted_at=request.submitted_at,
        )
        return to_domain_request(row)

    def update_request(self, request_id: UUID, **changes: Any) -> RoomRequest | None:
        updated = orm.RoomRequest.objects.filter(pk=request_id).update(**_persisted(changes))
        if not updated:
            return None
        return to_domain_request(orm.RoomRequest.objects.get(pk=request_id))

    def list_complaints(self, status: RequestStatus | None = None) -> list[Complaint]:
        rows = orm.Complaint.objects.all()
        if status is not None:
            rows = rows.filter(status=status.value)
        return [to_domain_complaint(row) for row in rows]

    def add_complaint(self, complaint: Complaint) -> Complaint:
        row = orm.Complaint.objects.create(
            id=complaint.id,
            user_id=complaint.user_id,
            room_id=complaint.room_id,
            category=complaint.category,
            description=complaint.description,
            status=complaint.status.value,
            submitted_at=complaint.submitted_at,
        )
        return to_domain_complaint(row)

    def update_complaint(self, complaint_id: UUID, **changes: Any) -> Complaint | None:
        updated = orm.Complaint.objects.filter(pk=complaint_id).update(**_persisted(changes))
        if not updated:
            return None
        return to_domain_complaint(orm.Complaint.objects.get(pk=complaint_id))
