from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.attendance_calendar.attendance_calendar.calendars.model import CachedDailyRow
from src.attendance_calendar.attendance_calendar.calendars.service import CalendarService
from src.attendance_calendar.attendance_calendar.core.enums import PunchType
from src.attendance_calendar.attendance_calendar.holidays.model import HolidayRecord
from src.attendance_calendar.attendance_calendar.leaves.model import LeaveRecord
from src.attendance_calendar.attendance_calendar.punches.model import Punch


class InMemoryPunches:
    def __init__(self):
        self.punches: list[Punch] = []
        self.calls = 0

    def add(self, employee_id: int, when: datetime, punch_type: PunchType | str) -> None:
        self.punches.append(Punch(employee_id, when.date(), when, punch_type))

    def add_day(self, employee_id: int, work_date: date, check_in: Optional[str], check_out: Optional[str]) -> None:
        if check_in:
            self.add(employee_id, datetime.fromisoformat(f"{work_date.isoformat()}T{check_in}"), PunchType.IN)
        if check_out:
            self.add(employee_id, datetime.fromisoformat(f"{work_date.isoformat()}T{check_out}"), PunchType.OUT)

    def get_punches(self, *, employee_id: int, start_date: date, end_date: date):
        self.calls += 1
        return [
            p
            for p in self.punches
            if p.employee_id == employee_id and start_date <= p.work_date <= end_date
        ]


class InMemoryLeaves:
    def __init__(self):
        self.leaves: list[LeaveRecord] = []
        self.calls = 0

    def add(self, leave: LeaveRecord) -> None:
        self.leaves.append(leave)

    def get_leaves(self, *, employee_id: Optional[int], start_date: date, end_date: date):
        self.calls += 1
        return [
            lv
            for lv in self.leaves
            if lv.from_date <= end_date and lv.to_date >= start_date
            and (employee_id is None or lv.employee_id in (None, employee_id))
        ]


class InMemoryHolidays:
    def __init__(self):
        self.holidays: list[HolidayRecord] = []
        self.calls = 0

    def add(self, holiday: HolidayRecord) -> None:
        self.holidays.append(holiday)

    def get_holidays(self, *, year: int, month: int):
        self.calls += 1
        return [h for h in self.holidays if h.holiday_date.year == year and h.holiday_date.month == month]


class InMemoryDailyCache:
    """Mirrors MySQL ON UPDATE CURRENT_TIMESTAMP: updated_at moves only when content changes."""

    def __init__(self):
        self.rows: dict[tuple[int, date], CachedDailyRow] = {}
        self.writes = 0
        self._clock = datetime(2025, 1, 1, 0, 0, 0)

    def upsert(self, row: CachedDailyRow) -> None:
        self.writes += 1
        key = (row.employee_id, row.attendance_date)
        existing = self.rows.get(key)
        if existing is not None and existing == row:
            return
        self._clock += timedelta(seconds=1)
        self.rows[key] = replace(row, updated_at=self._clock)

    def get_for_employee_and_date(self, *, employee_id: int, attendance_date: date) -> Optional[CachedDailyRow]:
        return self.rows.get((employee_id, attendance_date))


class FailingDailyCache:
    def upsert(self, row: CachedDailyRow) -> None:
        raise RuntimeError("cache store unavailable")

    def get_for_employee_and_date(self, *, employee_id: int, attendance_date: date):
        return None


class FailingSource:
    """Stands in for any source whose backing store errors out."""

    def get_punches(self, **_):
        raise RuntimeError("connection lost")

    def get_leaves(self, **_):
        raise RuntimeError("connection lost")

    def get_holidays(self, **_):
        raise RuntimeError("connection lost")


class InMemoryEmployees:
    def __init__(self, ids):
        self.ids = set(ids)

    def exists(self, employee_id: int) -> bool:
        return employee_id in self.ids


@pytest.fixture
def punches():
    return InMemoryPunches()


@pytest.fixture
def leaves():
    return InMemoryLeaves()


@pytest.fixture
def holidays():
    return InMemoryHolidays()


@pytest.fixture
def daily_cache():
    return InMemoryDailyCache()


@pytest.fixture
def failing_cache():
    return FailingDailyCache()


@pytest.fixture
def failing_source():
    return FailingSource()


@pytest.fixture
def employees():
    return InMemoryEmployees({1, 2})


@pytest.fixture
def calendar_service(punches, leaves, holidays, daily_cache):
    return CalendarService(punches, leaves, holidays, daily_cache)
