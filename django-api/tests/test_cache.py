"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import date

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from events import models
from events.handlers.views import UPCOMING_CACHE_KEY, detail_cache_key
from events.signals import invalidate_events


@pytest.mark.django_db
class TestReadCaching:
    def test_detail_response_is_cached(self, api_client: APIClient):
        row = models.Event.objects.create(title="Launch", date=date(2030, 1, 1))

        api_client.get(f"/api/events/{row.id}")

        assert cache.get(detail_cache_key(str(row.id)))["title"] == "Launch"

    def test_not_found_is_not_cached(self, api_client: APIClient):
        api_client.get("/api/events/missing")

        assert cache.get(detail_cache_key("missing")) is None

    def test_upcoming_response_is_cached_with_its_date(self, api_client: APIClient, today):
        api_client.get("/api/events/upcoming")

        assert cache.get(UPCOMING_CACHE_KEY) == (today, [])

    def test_upcoming_cache_from_another_day_is_ignored(self, api_client: APIClient, yesterday, tomorrow):
        models.Event.objects.create(title="Tomorrow", date=tomorrow)
        cache.set(UPCOMING_CACHE_KEY, (yesterday, [{"id": "stale", "title": "Stale", "date": "2000-01-01"}]))

        response = api_client.get("/api/events/upcoming")

        assert [event["title"] for event in response.json()] == ["Tomorrow"]


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_upcoming_cache(self, api_client: APIClient, tomorrow):
        """Saving an event invalidates the events:upcoming cache key."""
        api_client.get("/api/events/upcoming")

        models.Event.objects.create(title="Launch", date=tomorrow)

        assert cache.get(UPCOMING_CACHE_KEY) is None
        assert [event["title"] for event in api_client.get("/api/events/upcoming").json()] == ["Launch"]

    def test_event_save_invalidates_detail_cache(self, api_client: APIClient):
        """Saving an event invalidates the events:{id} cache key."""
        row = models.Event.objects.create(title="Launch", date=date(2030, 1, 1))
        api_client.get(f"/api/events/{row.id}")

        row.title = "Relaunch"
        row.save()

        assert cache.get(detail_cache_key(str(row.id))) is None
        assert api_client.get(f"/api/events/{row.id}").json()["title"] == "Relaunch"

    def test_event_delete_invalidates_detail_cache(self, api_client: APIClient):
        row = models.Event.objects.create(title="Launch", date=date(2030, 1, 1))
        event_id = str(row.id)
        api_client.get(f"/api/events/{event_id}")

        row.delete()

        assert api_client.get(f"/api/events/{event_id}").status_code == 404

    def test_bulk_update_needs_explicit_invalidation(self, api_client: APIClient, tomorrow):
        """QuerySet.update skips signals; invalidate_events clears what it touched."""
        row = models.Event.objects.create(title="Launch", date=tomorrow)
        api_client.get(f"/api/events/{row.id}")
        api_client.get("/api/events/upcoming")

        models.Event.objects.filter(pk=row.pk).update(title="Relaunch")
        assert api_client.get(f"/api/events/{row.id}").json()["title"] == "Launch"

        invalidate_events([row.id])

        assert api_client.get(f"/api/events/{row.id}").json()["title"] == "Relaunch"
        assert [event["title"] for event in api_client.get("/api/events/upcoming").json()] == ["Relaunch"]
