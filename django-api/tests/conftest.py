"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from events.domain import (
    Capacity,
    EnrollmentWindow,
    Event,
    EventId,
    EventSubmission,
    EventWindow,
    Price,
)
from events.stores.interfaces import EventStore

NOV_11 = datetime(2018, 11, 11, 19, 0, tzinfo=timezone.utc)
NOV_12 = datetime(2018, 11, 12, 19, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed store for service tests."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}

    def save(self, event: Event) -> Event:
        saved = replace(event, id=EventId(uuid4()))
        self.events[saved.id] = saved
        return saved

    def list_events(self, offset: int = 0, limit: int | None = None) -> list[Event]:
        newest_first = list(reversed(self.events.values()))
        stop = None if limit is None else offset + limit
        return newest_first[offset:stop]

    def count_events(self) -> int:
        return len(self.events)

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def make_submission():
    def _make(
        base_price=100,
        max_price=200,
        opens_at=NOV_11,
        closes_at=NOV_11,
        location="강남역",
    ) -> EventSubmission:
        return EventSubmission(
            name="spring",
            description="description",
            enrollment_window=EnrollmentWindow(opens_at=opens_at, closes_at=closes_at),
            event_window=EventWindow(starts_at=NOV_11, ends_at=NOV_11),
            location=location,
            base_price=Price(base_price),
            max_price=Price(max_price),
            capacity=Capacity(100),
        )

    return _make


@pytest.fixture
def event_payload() -> dict:
    return {
        "name": "spring",
        "description": "description",
        "enrollmentWindow": {
            "opensAt": "2018-11-11T19:00:00Z",
            "closesAt": "2018-11-11T19:00:00Z",
        },
        "eventWindow": {
            "startsAt": "2018-11-11T19:00:00Z",
            "endsAt": "2018-11-11T19:00:00Z",
        },
        "location": "강남역",
        "basePrice": 100,
        "maxPrice": 200,
        "capacity": 100,
    }
