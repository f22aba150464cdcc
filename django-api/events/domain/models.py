"""Domain models representing submitted and persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Self

from events.domain.value_objects import (
    Capacity,
    EnrollmentWindow,
    EventId,
    EventWindow,
    Price,
)


class EventStatus(Enum):
    """Publication status of an Event."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    BEGAN_ENROLLMENT = "BEGAN_ENROLLMENT"


@dataclass(frozen=True)
class EventSubmission:
    """A structurally valid request to create an Event."""

    name: str
    description: str
    enrollment_window: EnrollmentWindow
    event_window: EventWindow
    capacity: Capacity
    location: str | None = None
    base_price: Price = Price(0)
    max_price: Price = Price(0)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId | None
    name: str
    description: str
    enrollment_window: EnrollmentWindow
    event_window: EventWindow
    location: str | None
    base_price: Price
    max_price: Price
    capacity: Capacity
    is_free: bool = False
    is_online: bool = False
    status: EventStatus = EventStatus.DRAFT

    @classmethod
    def from_submission(cls, submission: EventSubmission) -> Self:
        """Build an unsaved DRAFT event with its derived fields computed."""
        event = cls(
            id=None,
            name=submission.name,
            description=submission.description,
            enrollment_window=submission.enrollment_window,
            event_window=submission.event_window,
            location=submission.location,
            base_price=submission.base_price,
            max_price=submission.max_price,
            capacity=submission.capacity,
        )
        return event.update()

    def update(self) -> Self:
        """Return a copy with is_free and is_online recomputed."""
        return replace(
            self,
            is_free=self.base_price.is_zero and self.max_price.is_zero,
            is_online=self.location is None or not self.location.strip(),
        )
