from events.domain.models import Event, EventStatus, EventSubmission
from events.domain.validation import FieldFailure, ObjectFailure, ValidationErrors
from events.domain.value_objects import (
    Capacity,
    EnrollmentWindow,
    EventId,
    EventWindow,
    Price,
)

__all__ = [
    "Event",
    "EventStatus",
    "EventSubmission",
    "EventId",
    "EnrollmentWindow",
    "EventWindow",
    "Price",
    "Capacity",
    "ValidationErrors",
    "FieldFailure",
    "ObjectFailure",
]
