"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events.domain import Event, EventId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def today() -> date:
    return timezone.localdate()


@pytest.fixture
def tomorrow(today: date) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def yesterday(today: date) -> date:
    return today - timedelta(days=1)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 3, 14, 9, 30)


@pytest.fixture
def make_event():
    def _make(event_id: str, title: str, on: date) -> Event:
        return Event(id=EventId.from_string(event_id), title=title, date=on)

    return _make
