"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Opaque identifier for an Event, issued by the store."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("EventId cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    def __str__(self) -> str:
        return self.value
