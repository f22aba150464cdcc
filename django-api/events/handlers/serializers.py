"""Serializers for request input, domain output and validation errors."""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from rest_framework import serializers
from rest_framework.exceptions import ErrorDetail
from rest_framework.settings import api_settings

from events.domain import (
    Capacity,
    EnrollmentWindow,
    EventSubmission,
    EventWindow,
    FieldFailure,
    ObjectFailure,
    Price,
    ValidationErrors,
)

logger = logging.getLogger(__name__)

UNKNOWN_PROPERTY = "unknownProperty"

# Upper bound of the PositiveIntegerField columns.
MAX_INTEGER = 2_147_483_647


class RejectUnknownFieldsMixin:
    """Refuse input keys the serializer does not declare.

    Unknown keys are reported as a non-field error next to any field errors.
    """

    def to_internal_value(self, data):
        unknown = []
        if isinstance(data, Mapping):
            unknown = [key for key in data if key not in self.fields]
        try:
            value = super().to_internal_value(data)
        except serializers.ValidationError as exc:
            if not unknown:
                raise
            detail = dict(exc.detail)
            detail.setdefault(api_settings.NON_FIELD_ERRORS_KEY, []).append(
                _unknown_error(unknown)
            )
            raise serializers.ValidationError(detail) from exc
        if unknown:
            raise serializers.ValidationError(
                {api_settings.NON_FIELD_ERRORS_KEY: [_unknown_error(unknown)]}
            )
        return value


def _unknown_error(keys: list[str]) -> ErrorDetail:
    return ErrorDetail(f"Unknown properties: {', '.join(keys)}", code=UNKNOWN_PROPERTY)


class EnrollmentWindowSerializer(RejectUnknownFieldsMixin, serializers.Serializer):
    opensAt = serializers.DateTimeField(source="opens_at")
    closesAt = serializers.DateTimeField(source="closes_at")


class EventWindowSerializer(RejectUnknownFieldsMixin, serializers.Serializer):
    startsAt = serializers.DateTimeField(source="starts_at")
    endsAt = serializers.DateTimeField(source="ends_at")


class EventSubmissionSerializer(RejectUnknownFieldsMixin, serializers.Serializer):
    """Structural validation of an event creation request.

    Only presence, types and ranges are checked here; business rules run
    in the service once this passes.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    enrollmentWindow = EnrollmentWindowSerializer(source="enrollment_window")
    eventWindow = EventWindowSerializer(source="event_window")
    location = serializers.CharField(
        max_length=255,
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    basePrice = serializers.IntegerField(
        source="base_price", min_value=0, max_value=MAX_INTEGER, default=0
    )
    maxPrice = serializers.IntegerField(
        source="max_price", min_value=0, max_value=MAX_INTEGER, default=0
    )
    capacity = serializers.IntegerField(min_value=0, max_value=MAX_INTEGER)

    def build_submission(self) -> EventSubmission:
        data = self.validated_data
        return EventSubmission(
            name=data["name"],
            description=data["description"],
            enrollment_window=EnrollmentWindow(**data["enrollment_window"]),
            event_window=EventWindow(**data["event_window"]),
            location=data.get("location"),
            base_price=Price(data["base_price"]),
            max_price=Price(data["max_price"]),
            capacity=Capacity(data["capacity"]),
        )


def reject_serializer_errors(
    serializer: serializers.Serializer, errors: ValidationErrors
) -> None:
    """Record a failed serializer's errors into the sink.

    Nested fields are reported with dotted paths. The raw submitted value,
    when one was sent, becomes the rejected value.
    """
    _reject(serializer.errors, serializer.initial_data, "", errors)


def _reject(detail: Mapping, data: Any, prefix: str, errors: ValidationErrors) -> None:
    for key, value in detail.items():
        if key == api_settings.NON_FIELD_ERRORS_KEY:
            for item in value:
                if prefix:
                    rejected = None if isinstance(data, Mapping) else data
                    errors.reject_value(prefix, item.code, str(item), rejected)
                else:
                    errors.reject(item.code, str(item))
            continue

        path = f"{prefix}.{key}" if prefix else key
        raw = data.get(key) if isinstance(data, Mapping) else None
        if isinstance(value, Mapping):
            _reject(value, raw, path, errors)
        else:
            for item in value:
                errors.reject_value(path, item.code, str(item), raw)


class ErrorsSerializer(serializers.BaseSerializer):
    """Render a ValidationErrors sink as a flat list of records.

    Field failures come first, then object failures, each in recording
    order. A record that fails to render is logged and left out so the
    rest of the response still goes through.
    """

    def to_representation(self, errors: ValidationErrors) -> list[dict[str, str]]:
        records = []
        for failure in errors.field_errors:
            self._write(records, self._field_record, failure)
        for failure in errors.global_errors:
            self._write(records, self._object_record, failure)
        return records

    def _write(self, records, render, failure) -> None:
        try:
            records.append(render(failure))
        except Exception:
            logger.warning("Dropped unrenderable validation error %r", failure, exc_info=True)

    @staticmethod
    def _field_record(failure: FieldFailure) -> dict[str, str]:
        record = {
            "field": failure.field,
            "objectName": failure.object_name,
            "code": failure.code,
            "defaultMessage": failure.default_message,
        }
        if failure.rejected_value is not None:
            record["rejectedValue"] = _as_text(failure.rejected_value)
        return record

    @staticmethod
    def _object_record(failure: ObjectFailure) -> dict[str, str]:
        return {
            "objectName": failure.object_name,
            "code": failure.code,
            "defaultMessage": failure.default_message,
        }


def _as_text(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    enrollmentWindow = EnrollmentWindowSerializer(source="enrollment_window")
    eventWindow = EventWindowSerializer(source="event_window")
    location = serializers.CharField(allow_null=True)
    basePrice = serializers.IntegerField(source="base_price.value")
    maxPrice = serializers.IntegerField(source="max_price.value")
    capacity = serializers.IntegerField(source="capacity.value")
    isFree = serializers.BooleanField(source="is_free")
    isOnline = serializers.BooleanField(source="is_online")
    status = serializers.CharField(source="status.value")
