from events.handlers.views import EventDetailView, EventListView, UpcomingEventListView

__all__ = ["EventListView", "EventDetailView", "UpcomingEventListView"]
