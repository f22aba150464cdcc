from events.handlers.views import EventDetailView, EventListView, IndexView

__all__ = ["EventDetailView", "EventListView", "IndexView"]
