"""Django signals for cache invalidation.

Seat increments use a queryset update, which sends no post_save for the
event, so a new registration also invalidates its event. Invalidation waits
for the surrounding transaction to commit; a read in between would otherwise
re-cache rows that may still roll back.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_event
from events.models import Event, Registration


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches once an event save or delete commits."""
    transaction.on_commit(partial(invalidate_event, instance.pk))


@receiver([post_save, post_delete], sender=Registration)
def invalidate_registration_cache(sender, instance, **kwargs):
    """Invalidate the owning event's caches once a registration change commits."""
    transaction.on_commit(partial(invalidate_event, instance.event_id))
