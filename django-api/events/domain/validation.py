"""Request-scoped accumulation of validation failures."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldFailure:
    """A failure attributable to one named input attribute."""

    field: str
    object_name: str
    code: str
    default_message: str
    rejected_value: Any = None


@dataclass(frozen=True)
class ObjectFailure:
    """A failure arising from the object as a whole."""

    object_name: str
    code: str
    default_message: str


@dataclass
class ValidationErrors:
    """Append-only sink that validation steps record failures into.

    Field failures and object failures are kept apart, each in the order
    they were recorded.
    """

    object_name: str
    field_errors: list[FieldFailure] = field(default_factory=list)
    global_errors: list[ObjectFailure] = field(default_factory=list)

    def reject_value(
        self,
        field: str,
        code: str,
        default_message: str,
        rejected_value: Any = None,
    ) -> None:
        self.field_errors.append(
            FieldFailure(
                field=field,
                object_name=self.object_name,
                code=code,
                default_message=default_message,
                rejected_value=rejected_value,
            )
        )

    def reject(self, code: str, default_message: str) -> None:
        self.global_errors.append(
            ObjectFailure(
                object_name=self.object_name,
                code=code,
                default_message=default_message,
            )
        )

    def has_errors(self) -> bool:
        return bool(self.field_errors or self.global_errors)

    @property
    def error_count(self) -> int:
        return len(self.field_errors) + len(self.global_errors)
