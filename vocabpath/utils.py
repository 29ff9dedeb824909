"""Utility functions for the backend."""

from datetime import UTC, datetime
from typing import overload


@overload
def ensure_utc(moment: datetime) -> datetime: ...


@overload
def ensure_utc(moment: None) -> None: ...


@overload
def ensure_utc(moment: datetime | None) -> datetime | None: ...


def ensure_utc(moment: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes.

    SQLite drops tzinfo on DateTime(timezone=True) columns, and the access
    gate compares stored due dates against aware "now" values.
    """
    if moment is None:
        return None
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
