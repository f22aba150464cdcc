"""Unit tests for request validation and error rendering.

Run with: pytest tests/test_serializers.py -v
"""

import logging
from datetime import datetime, timezone

import pytest

from events.domain import ValidationErrors
from events.handlers.serializers import (
    MAX_INTEGER,
    ErrorsSerializer,
    EventSubmissionSerializer,
    reject_serializer_errors,
)


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


def structural_errors(payload) -> ValidationErrors:
    errors = ValidationErrors(object_name="eventSubmission")
    serializer = EventSubmissionSerializer(data=payload)
    assert not serializer.is_valid()
    reject_serializer_errors(serializer, errors)
    return errors


class TestErrorsSerializer:
    """Tests for rendering a ValidationErrors sink."""

    def test_field_errors_precede_object_errors(self):
        """Field records come first, each group in recording order."""
        errors = ValidationErrors(object_name="eventSubmission")
        errors.reject("globalOne", "first global")
        errors.reject_value("maxPrice", "wrongValue", "maxPrice is wrong", 50)
        errors.reject("globalTwo", "second global")
        errors.reject_value("basePrice", "wrongValue", "basePrice is wrong", 100)

        data = ErrorsSerializer(errors).data

        assert [record.get("field") for record in data] == ["maxPrice", "basePrice", None, None]
        assert [record["code"] for record in data[2:]] == ["globalOne", "globalTwo"]

    def test_field_record_shape(self):
        """A field record carries exactly field, objectName, code, message, value."""
        errors = ValidationErrors(object_name="eventSubmission")
        errors.reject_value("basePrice", "wrongValue", "basePrice is wrong", 100)

        assert ErrorsSerializer(errors).data == [
            {
                "field": "basePrice",
                "objectName": "eventSubmission",
                "code": "wrongValue",
                "defaultMessage": "basePrice is wrong",
                "rejectedValue": "100",
            }
        ]

    def test_missing_rejected_value_is_omitted(self):
        """No rejectedValue key at all when no value was rejected."""
        errors = ValidationErrors(object_name="eventSubmission")
        errors.reject_value("name", "required", "This field is required.")

        (record,) = ErrorsSerializer(errors).data
        assert "rejectedValue" not in record

    def test_falsy_rejected_value_is_kept(self):
        """Zero and empty string are values, not absence."""
        errors = ValidationErrors(object_name="eventSubmission")
        errors.reject_value("basePrice", "wrongValue", "basePrice is wrong", 0)
        errors.reject_value("name", "blank", "This field may not be blank.", "")

        data = ErrorsSerializer(errors).data
        assert [record["rejectedValue"] for record in data] == ["0", ""]

    def test_datetime_rejected_value_is_iso_text(self):
        """Datetimes render as ISO-8601."""
        errors = ValidationErrors(object_name="eventSubmission")
        closes_at = datetime(2018, 11, 11, 19, 0, tzinfo=timezone.utc)
        errors.reject_value("closesAt", "wrongValue", "closesAt is wrong value", closes_at)

        (record,) = ErrorsSerializer(errors).data
        assert record["rejectedValue"] == "2018-11-11T19:00:00+00:00"

    def test_object_record_shape(self):
        """An object record has no field or rejectedValue key."""
        errors = ValidationErrors(object_name="eventSubmission")
        errors.reject("unknownProperty", "Unknown properties: id")

        assert ErrorsSerializer(errors).data == [
            {
                "objectName": "eventSubmission",
                "code": "unknownProperty",
                "defaultMessage": "Unknown properties: id",
            }
        ]

    def test_unrenderable_record_is_dropped(self, caplog):
        """A faulty record is logged and skipped; the rest still render."""
        errors = ValidationErrors(object_name="eventSubmission")
        errors.reject_value("basePrice", "wrongValue", "basePrice is wrong", Unprintable())
        errors.reject_value("maxPrice", "wrongValue", "maxPrice is wrong", 50)
        errors.reject("unknownProperty", "Unknown properties: id")

        with caplog.at_level(logging.WARNING, logger="events"):
            data = ErrorsSerializer(errors).data

        assert [record.get("field") for record in data] == ["maxPrice", None]
        assert "Dropped unrenderable validation error" in caplog.text

    def test_empty_sink_renders_empty_list(self):
        """No failures, no records."""
        assert ErrorsSerializer(ValidationErrors(object_name="eventSubmission")).data == []


class TestEventSubmissionSerializer:
    """Tests for structural validation of creation requests."""

    def test_valid_payload_builds_submission(self, event_payload):
        """A complete payload becomes an EventSubmission."""
        serializer = EventSubmissionSerializer(data=event_payload)
        assert serializer.is_valid(), serializer.errors

        submission = serializer.build_submission()
        assert submission.name == "spring"
        assert submission.base_price.value == 100
        assert submission.max_price.value == 200
        assert submission.capacity.value == 100
        assert submission.location == "강남역"
        assert submission.enrollment_window.opens_at == datetime(
            2018, 11, 11, 19, 0, tzinfo=timezone.utc
        )

    def test_prices_default_to_zero(self, event_payload):
        """basePrice and maxPrice may be left out."""
        del event_payload["basePrice"]
        del event_payload["maxPrice"]
        serializer = EventSubmissionSerializer(data=event_payload)
        assert serializer.is_valid(), serializer.errors

        submission = serializer.build_submission()
        assert submission.base_price.is_zero
        assert submission.max_price.is_zero

    def test_location_whitespace_is_preserved(self, event_payload):
        """A blank location is kept as sent."""
        event_payload["location"] = "    "
        serializer = EventSubmissionSerializer(data=event_payload)
        assert serializer.is_valid(), serializer.errors
        assert serializer.build_submission().location == "    "

    def test_location_may_be_missing_or_null(self, event_payload):
        """location is optional."""
        del event_payload["location"]
        serializer = EventSubmissionSerializer(data=event_payload)
        assert serializer.is_valid(), serializer.errors
        assert serializer.build_submission().location is None

        event_payload["location"] = None
        serializer = EventSubmissionSerializer(data=event_payload)
        assert serializer.is_valid(), serializer.errors
        assert serializer.build_submission().location is None

    def test_empty_payload_reports_required_fields(self):
        """Missing required fields are field failures without a rejected value."""
        errors = structural_errors({})

        assert [failure.field for failure in errors.field_errors] == [
            "name",
            "description",
            "enrollmentWindow",
            "eventWindow",
            "capacity",
        ]
        assert {failure.code for failure in errors.field_errors} == {"required"}
        assert all(failure.rejected_value is None for failure in errors.field_errors)

    def test_nested_errors_use_dotted_paths(self, event_payload):
        """A bad nested value is reported by its full path with the raw value."""
        event_payload["enrollmentWindow"]["closesAt"] = "yesterday"
        errors = structural_errors(event_payload)

        (failure,) = errors.field_errors
        assert failure.field == "enrollmentWindow.closesAt"
        assert failure.code == "invalid"
        assert failure.rejected_value == "yesterday"

    def test_missing_window_bound_is_structural(self, event_payload):
        """An absent opensAt never reaches the business rules."""
        del event_payload["enrollmentWindow"]["opensAt"]
        errors = structural_errors(event_payload)

        (failure,) = errors.field_errors
        assert failure.field == "enrollmentWindow.opensAt"
        assert failure.code == "required"

    def test_negative_price_rejected(self, event_payload):
        """Prices are non-negative."""
        event_payload["basePrice"] = -1
        errors = structural_errors(event_payload)

        (failure,) = errors.field_errors
        assert failure.field == "basePrice"
        assert failure.code == "min_value"
        assert failure.rejected_value == -1

    def test_unknown_properties_are_object_failures(self, event_payload):
        """Client-supplied derived fields are refused."""
        event_payload.update({"id": 10, "isFree": True, "status": "PUBLISHED"})
        errors = structural_errors(event_payload)

        assert errors.field_errors == []
        (failure,) = errors.global_errors
        assert failure.code == "unknownProperty"
        assert failure.default_message == "Unknown properties: id, isFree, status"

    def test_non_object_body_is_object_failure(self):
        """A JSON list is not an event."""
        errors = structural_errors(["spring"])

        assert errors.field_errors == []
        (failure,) = errors.global_errors
        assert failure.code == "invalid"

    @pytest.mark.parametrize("field", ["basePrice", "maxPrice", "capacity"])
    def test_integers_above_column_range_rejected(self, event_payload, field):
        """Integers past the storage range fail validation instead of the write."""
        event_payload[field] = 10**30
        errors = structural_errors(event_payload)

        (failure,) = errors.field_errors
        assert failure.field == field
        assert failure.code == "max_value"
        assert failure.rejected_value == 10**30

    def test_largest_storable_integer_accepted(self, event_payload):
        """The column maximum itself is still valid."""
        event_payload["capacity"] = MAX_INTEGER
        serializer = EventSubmissionSerializer(data=event_payload)
        assert serializer.is_valid(), serializer.errors
        assert serializer.build_submission().capacity.value == MAX_INTEGER

    def test_unknown_properties_reported_with_field_errors(self, event_payload):
        """Unknown keys and missing fields are reported together."""
        del event_payload["name"]
        event_payload["isFree"] = True
        errors = structural_errors(event_payload)

        assert [(f.field, f.code) for f in errors.field_errors] == [("name", "required")]
        (failure,) = errors.global_errors
        assert failure.code == "unknownProperty"
        assert failure.default_message == "Unknown properties: isFree"

    @pytest.mark.parametrize("window, extra", [("enrollmentWindow", "closed"), ("eventWindow", "timezone")])
    def test_unknown_nested_properties_rejected(self, event_payload, window, extra):
        """Extra keys inside a window are reported against that window."""
        event_payload[window][extra] = "x"
        errors = structural_errors(event_payload)

        assert errors.global_errors == []
        (failure,) = errors.field_errors
        assert failure.field == window
        assert failure.code == "unknownProperty"
        assert failure.default_message == f"Unknown properties: {extra}"
        assert failure.rejected_value is None
