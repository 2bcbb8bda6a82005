"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def add_event(self, title: str, date: date) -> Event:
        """Persist a new event and return it with its generated ID."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events_from(self, start: date) -> list[Event]:
        """Return events dated on or after ``start``.

        Ordered by date ascending, then by creation order.
        """
        ...
