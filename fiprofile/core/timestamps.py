"""
Timestamp helpers.

Profiles carry ``lastUpdated`` as an ISO-8601 UTC string with millisecond
precision and a ``Z`` suffix, e.g. ``2025-10-05T12:00:00.000Z``.
"""

from __future__ import annotations

from datetime import UTC, datetime


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are treated as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_timestamp(dt: datetime) -> str:
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    return as_utc(datetime.fromisoformat(value))
