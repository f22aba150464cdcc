"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Price:
    """Whole-unit price; zero means no charge."""

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Price cannot be negative")

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EnrollmentWindow:
    """Period during which attendees may enroll.

    Ordering of the bounds is a business rule checked by the validators,
    not enforced here.
    """

    opens_at: datetime
    closes_at: datetime


@dataclass(frozen=True)
class EventWindow:
    """Period during which the event takes place."""

    starts_at: datetime
    ends_at: datetime
