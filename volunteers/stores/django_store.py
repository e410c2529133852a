"""Django ORM implementation of the VolunteerStore."""

from django.db import IntegrityError, transaction
from django.db.models import Prefetch

from events.domain import EventId
from volunteers import models as orm
from volunteers.domain import Volunteer, VolunteerId
from volunteers.stores.interfaces import VolunteerStore


def to_domain(row: orm.Volunteer) -> Volunteer:
    assignments = list(row.assignments.all())
    return Volunteer(
        id=VolunteerId(row.id),
        name=row.name,
        email=row.email,
        assigned_event_ids=tuple(EventId(a.event_id) for a in assignments),
        attendance={EventId(a.event_id): a.attended for a in assignments if a.attended is not None},
        tasks={EventId(a.event_id): a.task for a in assignments if a.task},
    )


def _volunteers():
    return orm.Volunteer.objects.prefetch_related(
        Prefetch("assignments", queryset=orm.VolunteerAssignment.objects.order_by("assigned_at"))
    )


class DjangoVolunteerStore(VolunteerStore):
    """Database-backed volunteer store using Django ORM."""

    def list_volunteers(self) -> list[Volunteer]:
        return [to_domain(row) for row in _volunteers()]

    def list_for_event(self, event_id: EventId) -> list[Volunteer]:
        rows = _volunteers().filter(assignments__event_id=event_id.value).distinct()
        return [to_domain(row) for row in rows]

    def get_volunteer(self, volunteer_id: VolunteerId) -> Volunteer | None:
        row = _volunteers().filter(pk=volunteer_id.value).first()
        return to_domain(row) if row is not None else None

    def create_volunteer(self, name: str, email: str) -> Volunteer:
        row = orm.Volunteer.objects.create(name=name, email=email)
        return Volunteer(id=VolunteerId(row.id), name=row.name, email=row.email)

    def add_assignment(self, volunteer_id: VolunteerId, event_id: EventId) -> bool:
        try:
            with transaction.atomic():
                orm.VolunteerAssignment.objects.create(
                    volunteer_id=volunteer_id.value, event_id=event_id.value
                )
        except IntegrityError:
            return False
        return True

    def remove_assignment(self, volunteer_id: VolunteerId, event_id: EventId) -> bool:
        deleted, _ = orm.VolunteerAssignment.objects.filter(
            volunteer_id=volunteer_id.value, event_id=event_id.value
        ).delete()
        return deleted > 0

    def set_attendance(self, volunteer_id: VolunteerId, event_id: EventId, attended: bool) -> bool:
        return self._update_assignment(volunteer_id, event_id, attended=attended)

    def set_task(self, volunteer_id: VolunteerId, event_id: EventId, task: str) -> bool:
        return self._update_assignment(volunteer_id, event_id, task=task)

    def _update_assignment(self, volunteer_id: VolunteerId, event_id: EventId, **fields) -> bool:
        updated = orm.VolunteerAssignment.objects.filter(
            volunteer_id=volunteer_id.value, event_id=event_id.value
        ).update(**fields)
        return updated == 1
