"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Sequence

from events.domain import Event, EventId, EventSubmission, ValidationErrors
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventError,
    InvalidEventIdError,
)
from events.domain.validators import EVENT_VALIDATORS, Validator, validate_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        validators: tuple[Validator, ...] = EVENT_VALIDATORS,
    ) -> None:
        self._store = store
        self._validators = validators

    def create_event(
        self, submission: EventSubmission, errors: ValidationErrors
    ) -> Event:
        """Validate a submission and persist it as a DRAFT event.

        Business-rule failures are recorded into ``errors``, which the caller
        may already have used for structural checks.

        Raises:
            InvalidEventError: If ``errors`` holds any failure after validation.
        """
        validate_event(submission, errors, self._validators)
        if errors.has_errors():
            logger.info(
                "Rejected event submission %r with %d error(s)",
                submission.name,
                errors.error_count,
            )
            raise InvalidEventError(errors)

        event = self._store.save(Event.from_submission(submission))
        logger.info("Created event %s (%r)", event.id, event.name)
        return event

    def list_events(self, offset: int = 0, limit: int | None = None) -> list[Event]:
        """Return events newest first, optionally one slice of them."""
        return self._store.list_events(offset=offset, limit=limit)

    def count_events(self) -> int:
        return self._store.count_events()

    def catalog(self) -> "EventCatalog":
        """Return a lazy view of all events for paginators."""
        return EventCatalog(self._store)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(self._parse_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc


class EventCatalog(Sequence):
    """Read-only sequence of events that loads only the slices it is asked for."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def __len__(self) -> int:
        return self._store.count_events()

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError("EventCatalog slices must be contiguous")
            start, stop = index.start or 0, index.stop
            if start < 0 or (stop is not None and stop < 0):
                start, stop, _ = index.indices(len(self))
            limit = None if stop is None else max(stop - start, 0)
            return self._store.list_events(offset=start, limit=limit)
        if index < 0:
            index += len(self)
        events = self._store.list_events(offset=index, limit=1)
        if not events:
            raise IndexError("event index out of range")
        return events[0]
