from django.urls import path

from events.handlers import EventDetailView, EventListView, IndexView

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
