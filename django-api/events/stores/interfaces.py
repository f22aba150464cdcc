"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Persist a new event and return it with its identity assigned."""
        ...

    @abstractmethod
    def list_events(self, offset: int = 0, limit: int | None = None) -> list[Event]:
        """Return a slice of events ordered by created_at descending.

        A limit of None returns every event from offset onwards.
        """
        ...

    @abstractmethod
    def count_events(self) -> int:
        """Return the total number of events."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...
