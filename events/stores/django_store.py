"""Django ORM implementation of the event stores."""

import logging
from contextlib import AbstractContextManager
from typing import Any

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from events import models as orm
from events.domain import Capacity, Event, EventDraft, EventId, Money, Registration, RegistrationId
from events.domain.errors import (
    CapacityRaceLostError,
    DuplicateRegistrationError,
    EventNotFoundError,
)
from events.stores.interfaces import EventStore, RegistrationStore, check_updatable

logger = logging.getLogger(__name__)

_MONEY_FIELDS = frozenset({"cost", "estimated_cost", "sponsorship_amount"})


def _optional_money(amount) -> Money | None:
    return Money(amount) if amount is not None else None


def to_domain_event(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        speaker=row.speaker,
        room_assignment=row.room_assignment,
        date=row.date,
        total_seats=Capacity(row.total_seats),
        registered_seats=row.registered_seats,
        cost=Money(row.cost),
        sponsorship=row.sponsorship,
        estimated_cost=_optional_money(row.estimated_cost),
        sponsorship_amount=_optional_money(row.sponsorship_amount),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_domain_registration(row: orm.Registration) -> Registration:
    return Registration(
        id=RegistrationId(row.id),
        event_id=EventId(row.event_id),
        user_id=row.user_id,
        registered_at=row.registered_at,
        token=row.token,
        document_url=row.document_url,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [to_domain_event(row) for row in orm.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(pk=event_id.value).first()
        return to_domain_event(row) if row is not None else None

    def create_event(self, draft: EventDraft) -> Event:
        row = orm.Event.objects.create(
            name=draft.name,
            description=draft.description,
            speaker=draft.speaker,
            room_assignment=draft.room_assignment,
            date=draft.date,
            total_seats=draft.total_seats.value,
            registered_seats=0,
            cost=draft.cost.amount,
            sponsorship=draft.sponsorship,
            estimated_cost=draft.estimated_cost.amount if draft.estimated_cost else None,
            sponsorship_amount=draft.sponsorship_amount.amount if draft.sponsorship_amount else None,
        )
        return to_domain_event(row)

    def update_event(self, event_id: EventId, **changes: Any) -> Event | None:
        check_updatable(changes)
        row = orm.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        for field, value in changes.items():
            if field in _MONEY_FIELDS and value is not None:
                value = value.amount
            setattr(row, field, value)
        # post_save fires here, which keeps cached reads fresh.
        row.save(update_fields=[*changes, "updated_at"])
        return to_domain_event(row)

    def increment_seats(self, event_id: EventId) -> Event:
        updated = orm.Event.objects.filter(
            pk=event_id.value,
            registered_seats__lt=F("total_seats"),
        ).update(
            registered_seats=F("registered_seats") + 1,
            updated_at=timezone.now(),
        )
        if updated != 1:
            if not orm.Event.objects.filter(pk=event_id.value).exists():
                raise EventNotFoundError(str(event_id))
            logger.warning("Seat increment lost the race for event %s", event_id)
            raise CapacityRaceLostError(str(event_id))
        return to_domain_event(orm.Event.objects.get(pk=event_id.value))

    def atomic(self) -> AbstractContextManager[None]:
        return transaction.atomic()


class DjangoRegistrationStore(RegistrationStore):
    """Database-backed registration store using Django ORM."""

    def get_registration(self, event_id: EventId, user_id: str) -> Registration | None:
        row = orm.Registration.objects.filter(event_id=event_id.value, user_id=user_id).first()
        return to_domain_registration(row) if row is not None else None

    def add_registration(self, registration: Registration) -> Registration:
        try:
            with transaction.atomic():
                row = orm.Registration.objects.create(
                    id=registration.id.value,
                    event_id=registration.event_id.value,
                    user_id=registration.user_id,
                    registered_at=registration.registered_at,
                    token=registration.token,
                    document_url=registration.document_url,
                )
        except IntegrityError as exc:
            raise DuplicateRegistrationError(
                str(registration.event_id), registration.user_id
            ) from exc
        return to_domain_registration(row)

    def list_registrations(self, event_id: EventId) -> list[Registration]:
        rows = orm.Registration.objects.filter(event_id=event_id.value)
        return [to_domain_registration(row) for row in rows]
