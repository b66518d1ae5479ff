"""Common types and helpers shared across models."""

from datetime import datetime
from typing import TypeAlias
from zoneinfo import ZoneInfo

DateStr: TypeAlias = str  # YYYYMMDD
TimeSlot: TypeAlias = str  # HHMM


def local_now(timezone: str) -> datetime:
    return datetime.now(ZoneInfo(timezone))


def with_timezone(dt: datetime, timezone: str) -> datetime:
    """Naive datetimes are read in ``timezone``; aware ones are converted to it."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=ZoneInfo(timezone))
    return dt.astimezone(ZoneInfo(timezone))
