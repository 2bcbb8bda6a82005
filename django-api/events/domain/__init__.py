from events.domain.errors import ValidationError
from events.domain.models import Event
from events.domain.results import (
    CreateEventResult,
    EventCreated,
    EventFound,
    EventNotFound,
    EventRejected,
    FetchEventResult,
)
from events.domain.value_objects import EventId

__all__ = [
    "Event",
    "EventId",
    "ValidationError",
    "CreateEventResult",
    "FetchEventResult",
    "EventCreated",
    "EventRejected",
    "EventFound",
    "EventNotFound",
]
