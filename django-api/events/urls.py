from django.urls import path

from events.handlers import EventDetailView, EventListView, UpcomingEventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/upcoming", UpcomingEventListView.as_view(), name="event-upcoming"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
