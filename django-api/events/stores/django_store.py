"""Django ORM implementation of the EventStore."""

from datetime import date

from django.core.exceptions import ValidationError as DjangoValidationError

from events import models
from events.domain import Event, EventId
from events.stores.interfaces import EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(id=EventId.from_string(str(row.id)), title=row.title, date=row.date)


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def add_event(self, title: str, date: date) -> Event:
        row = models.Event.objects.create(title=title, date=date)
        return _to_domain(row)

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            row = models.Event.objects.get(pk=event_id.value)
        except (models.Event.DoesNotExist, DjangoValidationError):
            # Identifiers that are not UUIDs cannot match a row.
            return None
        return _to_domain(row)

    def list_events_from(self, start: date) -> list[Event]:
        rows = models.Event.objects.filter(date__gte=start).order_by("date", "created_at")
        return [_to_domain(row) for row in rows]
