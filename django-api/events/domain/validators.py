"""Semantic rules applied to a structurally valid EventSubmission.

Each rule records failures into the shared sink and never raises.
Rules run in the order listed in EVENT_VALIDATORS, all of them, every time.
"""

from collections.abc import Callable

from events.domain.models import EventSubmission
from events.domain.validation import ValidationErrors

WRONG_VALUE = "wrongValue"

Validator = Callable[[EventSubmission, ValidationErrors], None]


def validate_price_range(submission: EventSubmission, errors: ValidationErrors) -> None:
    """A non-zero max price must not be below the base price."""
    if not submission.max_price.is_zero and submission.max_price < submission.base_price:
        # Both sides of the comparison are reported.
        errors.reject_value(
            "basePrice", WRONG_VALUE, "basePrice is wrong", submission.base_price.value
        )
        errors.reject_value(
            "maxPrice", WRONG_VALUE, "maxPrice is wrong", submission.max_price.value
        )


def validate_enrollment_window(
    submission: EventSubmission, errors: ValidationErrors
) -> None:
    """Enrollment must not close before it opens."""
    window = submission.enrollment_window
    if window.closes_at < window.opens_at:
        errors.reject_value(
            "closesAt", WRONG_VALUE, "closesAt is wrong value", window.closes_at
        )


EVENT_VALIDATORS: tuple[Validator, ...] = (
    validate_price_range,
    validate_enrollment_window,
)


def validate_event(
    submission: EventSubmission,
    errors: ValidationErrors,
    validators: tuple[Validator, ...] = EVENT_VALIDATORS,
) -> None:
    for validator in validators:
        validator(submission, errors)
