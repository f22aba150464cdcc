"""Hypermedia link builders for HAL responses."""

from django.urls import reverse
from rest_framework.request import Request

from events.domain import Event


def link(request: Request, viewname: str, *args: str) -> dict[str, str]:
    return {"href": request.build_absolute_uri(reverse(viewname, args=args))}


def self_link(request: Request, event: Event) -> dict[str, str]:
    return link(request, "event-detail", str(event.id))


def event_links(request: Request, event: Event) -> dict[str, dict[str, str]]:
    """Links attached to a single event representation."""
    return {
        "self": self_link(request, event),
        "query-events": link(request, "event-list"),
        "update-event": self_link(request, event),
    }
