"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map use-case outcomes to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from typing import assert_never

from django.conf import settings
from django.core.cache import cache
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import (
    EventCreated,
    EventFound,
    EventNotFound,
    EventRejected,
)
from events.handlers.error_catalog import message_for
from events.handlers.exceptions import error_response
from events.handlers.serializers import CreateEventRequestSerializer, EventSerializer
from events.services import EventService
from events.stores import DjangoEventStore

logger = logging.getLogger(__name__)

UPCOMING_CACHE_KEY = "events:upcoming"


def detail_cache_key(event_id: str) -> str:
    return f"events:{event_id}"


def cache_timeout() -> int:
    return getattr(settings, "EVENTS_CACHE_TIMEOUT", 300)


class EventServiceMixin:
    """Builds the service each view talks to.

    Override get_service() to substitute another store or a stub.
    """

    def get_service(self) -> EventService:
        return EventService(DjangoEventStore())


class EventListView(EventServiceMixin, APIView):
    """Handler for POST /api/events"""

    def post(self, request: Request) -> Response:
        payload = CreateEventRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        result = self.get_service().create_event(
            title=payload.validated_data["title"],
            date=payload.validated_data["date"],
            now=timezone.localtime(),
        )

        match result:
            case EventCreated(event=event):
                location = request.build_absolute_uri(
                    reverse("event-detail", kwargs={"event_id": str(event.id)})
                )
                return Response(
                    EventSerializer(event).data,
                    status=status.HTTP_201_CREATED,
                    headers={"Location": location},
                )
            case EventRejected(errors=errors):
                logger.debug("Event rejected: %s", [error.name for error in errors])
                return error_response(
                    [message_for(error) for error in errors],
                    status.HTTP_422_UNPROCESSABLE_ENTITY,
                )
            case _:
                assert_never(result)


class UpcomingEventListView(EventServiceMixin, APIView):
    """Handler for GET /api/events/upcoming"""

    def get(self, request: Request) -> Response:
        today = timezone.localdate()
        cached = cache.get(UPCOMING_CACHE_KEY)
        if cached is not None and cached[0] == today:
            return Response(cached[1])

        events = self.get_service().list_upcoming_events(today)
        data = list(EventSerializer(events, many=True).data)
        cache.set(UPCOMING_CACHE_KEY, (today, data), cache_timeout())
        return Response(data)


class EventDetailView(EventServiceMixin, APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = detail_cache_key(event_id)
        cached = cache.get(key)
        if cached is not None:
            return Response(cached)

        result = self.get_service().get_event(event_id)

        match result:
            case EventFound(event=event):
                data = dict(EventSerializer(event).data)
                if str(event.id) == event_id:
                    cache.set(key, data, cache_timeout())
                return Response(data)
            case EventNotFound(event_id=missing_id):
                logger.debug("Event %s not found", missing_id)
                return Response(status=status.HTTP_404_NOT_FOUND)
            case _:
                assert_never(result)
