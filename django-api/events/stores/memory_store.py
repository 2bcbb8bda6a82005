"""In-process EventStore used by tests and scripts."""

import uuid
from datetime import date

from events.domain import Event, EventId
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Keeps events in insertion order in a plain dict."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        for event in events or []:
            self._events[event.id] = event

    def add_event(self, title: str, date: date) -> Event:
        event = Event(id=EventId.from_string(str(uuid.uuid4())), title=title, date=date)
        self._events[event.id] = event
        return event

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def list_events_from(self, start: date) -> list[Event]:
        # sorted() is stable, so same-day events keep insertion order
        upcoming = [event for event in self._events.values() if event.date >= start]
        return sorted(upcoming, key=lambda event: event.date)
