"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from decimal import Decimal

import pytest
from django.core.cache import cache
from django.db import transaction
from rest_framework.test import APIClient

from events.cache import EVENT_LIST_CACHE_KEY, event_detail_cache_key
from events.dependencies import get_event_service, get_registration_service
from events.models import Event


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, make_db_event, django_capture_on_commit_callbacks):
        """Saving an event invalidates the events:list cache key."""
        event = make_db_event()
        cache.set(EVENT_LIST_CACHE_KEY, ["stale"])

        with django_capture_on_commit_callbacks(execute=True):
            row = Event.objects.get(pk=event.id.value)
            row.name = "Renamed"
            row.save()

        assert cache.get(EVENT_LIST_CACHE_KEY) is None

    def test_event_save_invalidates_detail_cache(self, make_db_event, django_capture_on_commit_callbacks):
        """Saving an event invalidates the events:{id} cache key."""
        event = make_db_event()
        key = event_detail_cache_key(event.id)
        cache.set(key, {"name": "stale"})

        with django_capture_on_commit_callbacks(execute=True):
            Event.objects.get(pk=event.id.value).save()

        assert cache.get(key) is None

    def test_registration_invalidates_event_caches(self, make_db_event, django_capture_on_commit_callbacks):
        """Registering updates seats through a queryset, so the registration row invalidates."""
        event = make_db_event()
        key = event_detail_cache_key(event.id)
        cache.set(key, {"registered_seats": 0})
        cache.set(EVENT_LIST_CACHE_KEY, ["stale"])

        with django_capture_on_commit_callbacks(execute=True):
            get_registration_service().register(str(event.id), "alice")

        assert cache.get(key) is None
        assert cache.get(EVENT_LIST_CACHE_KEY) is None

    def test_invalidation_waits_for_commit(self, make_db_event, django_capture_on_commit_callbacks):
        """Caches stay untouched until the registration's transaction commits."""
        event = make_db_event()
        key = event_detail_cache_key(event.id)

        with django_capture_on_commit_callbacks() as callbacks:
            get_registration_service().register(str(event.id), "alice")
            cache.set(key, {"registered_seats": 1})
            assert cache.get(key) == {"registered_seats": 1}

        assert len(callbacks) == 1
        callbacks[0]()
        assert cache.get(key) is None

    def test_rolled_back_read_is_not_cached(self, api_client: APIClient, make_db_event):
        """A detail read inside a transaction that rolls back leaves no cached seat count."""
        event = make_db_event(total_seats=2)
        key = event_detail_cache_key(event.id)

        with pytest.raises(RuntimeError):
            with transaction.atomic():
                get_registration_service().register(str(event.id), "alice")
                response = api_client.get(f"/api/events/{event.id}")
                assert response.data["registered_seats"] == 1
                raise RuntimeError("roll back")

        assert Event.objects.get(pk=event.id.value).registered_seats == 0
        assert cache.get(key) is None
        assert api_client.get(f"/api/events/{event.id}").data["registered_seats"] == 0

    def test_event_delete_invalidates_detail_cache(self, make_db_event, django_capture_on_commit_callbacks):
        event = make_db_event()
        key = event_detail_cache_key(event.id)
        cache.set(key, {"name": "stale"})

        with django_capture_on_commit_callbacks(execute=True):
            Event.objects.filter(pk=event.id.value).first().delete()

        assert cache.get(key) is None

    def test_financial_update_invalidates_detail_cache(self, make_db_event, django_capture_on_commit_callbacks):
        event = make_db_event()
        key = event_detail_cache_key(event.id)
        cache.set(key, {"estimated_cost": None})

        with django_capture_on_commit_callbacks(execute=True):
            get_event_service().update_financials(str(event.id), estimated_cost=Decimal("10"))

        assert cache.get(key) is None


@pytest.mark.django_db(transaction=True)
class TestCachedReads:
    """Cached reads outside a test transaction, where writes autocommit."""

    def test_detail_is_cached_then_refreshed_after_registration(self, api_client: APIClient, make_db_event):
        event = make_db_event(total_seats=2)
        key = event_detail_cache_key(event.id)

        api_client.get(f"/api/events/{event.id}")
        assert cache.get(key)["registered_seats"] == 0

        api_client.post(f"/api/events/{event.id}/registrations", {"user_id": "alice"}, format="json")
        assert cache.get(key) is None

        response = api_client.get(f"/api/events/{event.id}")
        assert response.data["registered_seats"] == 1
        assert response.data["seats_available"] == 1

    def test_list_is_cached(self, api_client: APIClient, make_db_event):
        make_db_event()
        api_client.get("/api/events")
        assert len(cache.get(EVENT_LIST_CACHE_KEY)) == 1


class TestCacheKeys:
    """Tests for cache key construction."""

    def test_detail_key_normalizes_uuid_case(self):
        raw = "ABCDEF12-3456-7890-ABCD-EF1234567890"
        assert event_detail_cache_key(raw) == f"events:{raw.lower()}"

    def test_detail_key_keeps_invalid_ids(self):
        assert event_detail_cache_key("nope") == "events:nope"
