"""Timestamps for stored chunk and embedding records."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime (created_at)."""
    return datetime.now(timezone.utc)
