"""Django ORM implementation of the EventStore."""

from events import models
from events.domain import (
    Capacity,
    EnrollmentWindow,
    Event,
    EventId,
    EventStatus,
    EventWindow,
    Price,
)
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def save(self, event: Event) -> Event:
        row = models.Event.objects.create(
            name=event.name,
            description=event.description,
            opens_at=event.enrollment_window.opens_at,
            closes_at=event.enrollment_window.closes_at,
            starts_at=event.event_window.starts_at,
            ends_at=event.event_window.ends_at,
            location=event.location,
            base_price=event.base_price.value,
            max_price=event.max_price.value,
            capacity=event.capacity.value,
            is_free=event.is_free,
            is_online=event.is_online,
            status=event.status.value,
        )
        return _to_domain(row)

    def list_events(self, offset: int = 0, limit: int | None = None) -> list[Event]:
        stop = None if limit is None else offset + limit
        rows = models.Event.objects.all()[offset:stop]
        return [_to_domain(row) for row in rows]

    def count_events(self) -> int:
        return models.Event.objects.count()

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        return _to_domain(row)


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        enrollment_window=EnrollmentWindow(opens_at=row.opens_at, closes_at=row.closes_at),
        event_window=EventWindow(starts_at=row.starts_at, ends_at=row.ends_at),
        location=row.location,
        base_price=Price(row.base_price),
        max_price=Price(row.max_price),
        capacity=Capacity(row.capacity),
        is_free=row.is_free,
        is_online=row.is_online,
        status=EventStatus(row.status),
    )
