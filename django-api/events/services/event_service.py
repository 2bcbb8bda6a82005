"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Return domain outcomes, never HTTP concerns
"""

import logging
from datetime import date, datetime

from events.domain import (
    CreateEventResult,
    Event,
    EventCreated,
    EventFound,
    EventId,
    EventNotFound,
    EventRejected,
    FetchEventResult,
    ValidationError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def create_event(self, title: str, date: date, now: datetime) -> CreateEventResult:
        """Create an event, or report every rule it breaks.

        Errors are reported in a fixed order: title first, then date.
        """
        errors: list[ValidationError] = []
        if not title.strip():
            errors.append(ValidationError.TITLE_IS_REQUIRED)
        if date < now.date():
            errors.append(ValidationError.DATE_MUST_NOT_BE_PAST)

        if errors:
            return EventRejected(errors=tuple(errors))

        event = self._store.add_event(title=title, date=date)
        logger.info("Created event %s for %s", event.id, event.date.isoformat())
        return EventCreated(event=event)

    def get_event(self, event_id: str) -> FetchEventResult:
        """Return the event with the given ID, or a not-found outcome."""
        key = EventId.from_string(event_id)
        event = self._store.get_event(key)
        if event is None:
            return EventNotFound(event_id=event_id)
        return EventFound(event=event)

    def list_upcoming_events(self, today: date) -> list[Event]:
        """Return events dated today or later, in the store's order."""
        return self._store.list_events_from(today)
