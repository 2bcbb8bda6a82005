from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventStore
from events.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "DjangoEventStore", "InMemoryEventStore"]
