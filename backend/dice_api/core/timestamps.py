"""Timestamps — UTC ISO-8601 strings with millisecond precision and Z suffix."""

from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
    """Format an aware datetime as e.g. 2025-01-01T12:00:00.000Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_timestamp() -> str:
    return format_timestamp(datetime.now(timezone.utc))
