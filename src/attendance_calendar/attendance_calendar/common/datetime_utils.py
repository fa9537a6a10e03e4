from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date_key(value: date | datetime | str) -> str:
    """Canonical YYYY-MM-DD key used by every per-date index.

    Dates come from the local calendar; no UTC conversion is applied.
    """
    if isinstance(value, str):
        return parse_iso_date(value[:10]).isoformat()
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value.isoformat()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Inclusive first/last day of a month."""
    first = date(year, month, 1)
    next_month = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return first, next_month - timedelta(days=1)


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def day_name(value: date) -> str:
    """English weekday name, independent of the process locale."""
    return DAY_NAMES[value.weekday()]


def wall_clock_time(value: Optional[datetime]) -> Optional[time]:
    """Time-of-day as stored, dropping seconds fractions and tzinfo."""
    if value is None:
        return None
    return value.time().replace(microsecond=0, tzinfo=None)

