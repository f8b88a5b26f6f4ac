"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone

import pytest

from events.domain import EventId, ImageUpload, UserId
from events.domain.errors import EventValidationError, ErrorCode, StoreFailureError
from events.services.validation import parse_timestamp


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_integer(self):
        assert EventId.from_string("42") == EventId(42)

    def test_from_string_accepts_int(self):
        assert EventId.from_string(7).value == 7

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5", "", "  "])
    def test_from_string_rejects_invalid(self, raw):
        with pytest.raises(ValueError):
            EventId.from_string(raw)

    def test_constructor_rejects_non_positive(self):
        with pytest.raises(ValueError):
            EventId(0)


class TestUserId:
    """Tests for UserId value object."""

    def test_from_value_accepts_numeric_string(self):
        assert UserId.from_value("3") == UserId(3)

    @pytest.mark.parametrize("raw", [None, True, 0, -1, "x", 2.5, []])
    def test_from_value_rejects_invalid(self, raw):
        with pytest.raises(ValueError):
            UserId.from_value(raw)


class TestImageUpload:
    def test_image_media_type(self):
        assert ImageUpload(media_type="image/png", storage_ref="images/a.png").is_image

    def test_non_image_media_type(self):
        assert not ImageUpload(media_type="application/pdf", storage_ref="a.pdf").is_image

    def test_empty_media_type(self):
        assert not ImageUpload(media_type="", storage_ref="a").is_image


class TestParseTimestamp:
    def test_date_only_is_midnight_utc(self):
        assert parse_timestamp("2025-01-01") == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_offset_is_normalized_to_utc(self):
        parsed = parse_timestamp("2025-01-01T10:00:00+02:00")
        assert parsed == datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)
        assert parsed.utcoffset().total_seconds() == 0

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-06-15T12:30:00Z") == datetime(
            2024, 6, 15, 12, 30, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "raw",
        [
            "not a date",
            "2024-02-30",
            "2024-13-01",
            "tomorrow",
            "9999-12-31T23:00:00-05:00",
            "0001-01-01T00:30:00+01:00",
        ],
    )
    def test_invalid_returns_none(self, raw):
        assert parse_timestamp(raw) is None


class TestErrors:
    def test_validation_error_keeps_every_message(self):
        exc = EventValidationError(["a", "b"])
        assert exc.code is ErrorCode.VALIDATION_FAILED
        assert exc.errors == ("a", "b")

    def test_store_failure_message_is_generic(self):
        exc = StoreFailureError("database is locked")
        assert exc.message == "Storage operation failed"
        assert exc.detail == "database is locked"
        assert "locked" not in str(exc)
