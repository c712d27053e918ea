from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def day_key(now: Optional[datetime] = None) -> str:
    """Calendar day as stored on attendance records."""
    return (now or now_local()).strftime(DATE_FORMAT)


def clock_time(now: Optional[datetime] = None) -> str:
    """Time of day as stored on attendance records (HH:MM)."""
    return (now or now_local()).strftime(TIME_FORMAT)


def minutes_since_midnight(value: str) -> int:
    hours, minutes = value.strip().split(":")[:2]
    return int(hours) * 60 + int(minutes)
