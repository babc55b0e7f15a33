"""Tests for timestamp helpers."""

from datetime import UTC, datetime, timedelta, timezone

from filetree.time_format import format_iso_timestamp, timestamp_from_mtime


class TestTimestampFromMtime:
    """Test cases for timestamp_from_mtime."""

    def test_epoch(self) -> None:
        assert timestamp_from_mtime(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_timezone_aware(self) -> None:
        assert timestamp_from_mtime(1_700_000_000).tzinfo is UTC


class TestFormatIsoTimestamp:
    """Test cases for format_iso_timestamp."""

    def test_millisecond_precision(self) -> None:
        value = datetime(2024, 1, 2, 3, 4, 5, 678_999, tzinfo=UTC)
        assert format_iso_timestamp(value) == "2024-01-02T03:04:05.678Z"

    def test_converts_to_utc(self) -> None:
        value = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_iso_timestamp(value) == "2024-01-02T03:04:05.000Z"

    def test_naive_treated_as_utc(self) -> None:
        assert format_iso_timestamp(datetime(2024, 1, 2)) == "2024-01-02T00:00:00.000Z"
