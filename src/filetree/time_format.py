"""Timestamp helpers for file metadata."""

from datetime import UTC, datetime


def timestamp_from_mtime(mtime: float) -> datetime:
    """Convert a ``st_mtime`` value to a timezone-aware UTC datetime.

    Args:
        mtime: Unix timestamp (from stat().st_mtime)

    Returns:
        UTC datetime

    """
    return datetime.fromtimestamp(mtime, tz=UTC)


def format_iso_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision.

    Naive datetimes are assumed to already be UTC.

    Examples:
        >>> format_iso_timestamp(datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC))
        '2024-01-02T03:04:05.678Z'

    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
