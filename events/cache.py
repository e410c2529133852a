"""Cache keys and cached reads for events."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from django.conf import settings
from django.core.cache import cache
from django.db import transaction

EVENT_LIST_CACHE_KEY = "events:list"


def event_detail_cache_key(event_id: object) -> str:
    try:
        event_id = UUID(str(event_id))
    except ValueError:
        pass
    return f"events:{event_id}"


def cached_read(key: str, build: Callable[[], Any]) -> Any:
    """Return the cached value for key, building it on a miss.

    Reads made inside an open transaction are not stored: they may include
    writes that later roll back.
    """
    data = cache.get(key)
    if data is None:
        data = build()
        if not transaction.get_connection().in_atomic_block:
            cache.set(key, data, settings.EDUEVENT_CACHE_TIMEOUT)
    return data


def invalidate_event(event_id: object) -> None:
    cache.delete_many([EVENT_LIST_CACHE_KEY, event_detail_cache_key(event_id)])
