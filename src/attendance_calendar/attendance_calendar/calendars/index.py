"""Per-date lookup structures for one calendar request.

Both indexes are keyed by the canonical YYYY-MM-DD string and keep the first
record seen for a date, so duplicate or overlapping inputs resolve the same
way on every run without sorting.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import iter_dates, parse_iso_date, to_date_key
from ..holidays.model import HolidayRecord
from ..leaves.model import LeaveRecord


def _as_date(value) -> date:
    return parse_iso_date(to_date_key(value))


def build_holiday_index(holidays: Iterable[HolidayRecord]) -> dict[str, HolidayRecord]:
    index: dict[str, HolidayRecord] = {}
    for holiday in holidays:
        index.setdefault(to_date_key(holiday.holiday_date), holiday)
    return index


def build_leave_index(
    leaves: Iterable[LeaveRecord],
    *,
    employee_id: Optional[int] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> dict[str, LeaveRecord]:
    """Expand effective leaves into one entry per covered date.

    Records of other employees are skipped when both sides carry an id; records
    without an employee_id come from an unscoped table and are kept. start/end
    clip the expansion to the requested range.
    """

    index: dict[str, LeaveRecord] = {}
    for leave in leaves:
        if not leave.is_effective:
            continue
        if employee_id is not None and leave.employee_id is not None and int(leave.employee_id) != int(employee_id):
            continue

        lo = _as_date(leave.from_date)
        hi = _as_date(leave.to_date)
        if start is not None and lo < start:
            lo = start
        if end is not None and hi > end:
            hi = end

        for day in iter_dates(lo, hi):
            index.setdefault(day.isoformat(), leave)
    return index
