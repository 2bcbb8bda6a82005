"""Use-case outcomes.

Each use-case returns exactly one variant of its result union; handlers
match on the variant to build a response.
"""

from dataclasses import dataclass

from events.domain.errors import ValidationError
from events.domain.models import Event


@dataclass(frozen=True)
class EventCreated:
    event: Event


@dataclass(frozen=True)
class EventRejected:
    """Creation failed validation. ``errors`` is non-empty and ordered."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("EventRejected requires at least one error")


@dataclass(frozen=True)
class EventFound:
    event: Event


@dataclass(frozen=True)
class EventNotFound:
    event_id: str


CreateEventResult = EventCreated | EventRejected
FetchEventResult = EventFound | EventNotFound
