"""Timestamp helpers used by the audit trail."""

from datetime import UTC, datetime

__all__ = ["get_iso_timestamp", "elapsed_seconds"]


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        Timestamp such as "2026-02-03T12:34:56.123456Z".
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def elapsed_seconds(start: datetime) -> float:
    """Seconds elapsed since a timezone-aware UTC start time."""
    return (datetime.now(UTC) - start).total_seconds()
