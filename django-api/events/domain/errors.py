"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum

from events.domain.validation import ValidationErrors


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT = "INVALID_EVENT"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventError(DomainError):
    """Raised when a submission breaks one or more business rules."""

    def __init__(self, errors: ValidationErrors) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT,
            message=f"Event submission has {errors.error_count} error(s)",
        )
        self.errors = errors
