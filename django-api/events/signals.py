"""Django signals for cache invalidation.

Writes that bypass model signals (``QuerySet.update``, ``bulk_create``,
raw SQL) leave cached detail and upcoming responses stale until
``EVENTS_CACHE_TIMEOUT``; callers doing such writes must call
invalidate_events() with the affected IDs.
"""

from collections.abc import Iterable

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.handlers.views import UPCOMING_CACHE_KEY, detail_cache_key
from events.models import Event


def invalidate_events(event_ids: Iterable) -> None:
    """Drop the detail entries for ``event_ids`` and the upcoming list."""
    keys = [detail_cache_key(str(event_id)) for event_id in event_ids]
    cache.delete_many([*keys, UPCOMING_CACHE_KEY])


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_events([instance.id])
