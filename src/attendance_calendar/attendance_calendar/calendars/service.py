from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_name, iter_dates, month_bounds, parse_iso_date
from ..common.validators import parse_month, parse_option, require_positive_int, require_year_month
from ..core.enums import WorkedTimeBasis
from ..core.exceptions import CacheWriteError, DataSourceError, DomainError, NotFoundError, ValidationError
from ..employees.repository import EmployeeDirectory
from ..holidays.model import HolidayRecord
from ..holidays.repository import HolidaySource
from ..leaves.model import LeaveRecord
from ..leaves.repository import LeaveSource
from ..punches.aggregator import group_by_date
from ..punches.model import DayWindow, Punch
from ..punches.repository import PunchSource
from .duration import format_in_out_display, working_minutes, working_minutes_from_punches
from .index import build_holiday_index, build_leave_index
from .model import CachedDailyRow, CalendarData, DayStatus, color_for
from .repository import DailyCacheStore
from .resolver import DayContext, DayStatusResolver

logger = logging.getLogger(__name__)


class CalendarService:
    """Builds monthly attendance calendars and keeps the per-day cache in sync.

    Punches are mandatory; leaves and holidays are optional and read only when
    their capability flag is on. The cache store is optional too: without one
    calendars are computed and returned but never persisted.
    """

    def __init__(
        self,
        punches: PunchSource,
        leaves: Optional[LeaveSource] = None,
        holidays: Optional[HolidaySource] = None,
        cache: Optional[DailyCacheStore] = None,
        *,
        employees: Optional[EmployeeDirectory] = None,
        resolver: Optional[DayStatusResolver] = None,
        worked_time_basis: WorkedTimeBasis | str = WorkedTimeBasis.SPAN,
        leaves_enabled: bool = True,
        holidays_enabled: bool = True,
        parallel_fetch: bool = True,
    ):
        self._punches = punches
        self._leaves = leaves
        self._holidays = holidays
        self._cache = cache
        self._employees = employees
        self._resolver = resolver or DayStatusResolver()
        self._basis = parse_option(WorkedTimeBasis, worked_time_basis, "worked-time basis")
        self._leaves_enabled = bool(leaves_enabled) and leaves is not None
        self._holidays_enabled = bool(holidays_enabled) and holidays is not None
        self._parallel_fetch = bool(parallel_fetch)

    # ----- public operations -----

    def get_calendar(self, employee_id, year, month, *, persist: bool = True) -> CalendarData:
        """One DayStatus per calendar date of the month, ascending.

        Either the whole table is returned or an error is raised. Cache writes
        are best-effort and never change the returned table.
        """

        employee_id = require_positive_int(employee_id, "employeeId")
        year, month = require_year_month(year, month)
        self._ensure_employee(employee_id)

        start, end = month_bounds(year, month)
        punches, leaves, holidays = self._fetch_sources(employee_id, start, end, year, month)

        windows = group_by_date(punches)
        leave_index = build_leave_index(leaves, employee_id=employee_id, start=start, end=end)
        holiday_index = build_holiday_index(holidays)

        table: list[DayStatus] = []
        for work_date in iter_dates(start, end):
            key = work_date.isoformat()
            window = windows.get(key)
            day = self._build_day(work_date, window, leave_index.get(key), holiday_index.get(key))
            table.append(day)

            if persist and window is not None and window.has_punch:
                self._persist_best_effort(employee_id, day)

        return CalendarData(employee_id=employee_id, year=year, month=month, table=table)

    def get_calendar_for_month(self, employee_id, month: str, *, persist: bool = True) -> CalendarData:
        """Same as get_calendar, with the month given as YYYY-MM."""
        year, month_num = parse_month(month)
        return self.get_calendar(employee_id, year, month_num, persist=persist)

    def sync_day(self, employee_id, work_date: date | str) -> None:
        """Recompute one day and write it to the cache.

        Days without any punch are not cached. Unlike get_calendar, a failed
        write is raised as CacheWriteError so backfills can report it.
        """

        employee_id = require_positive_int(employee_id, "employeeId")
        work_date = self._coerce_date(work_date)
        require_year_month(work_date.year, work_date.month)

        if self._cache is None:
            logger.debug("Daily cache disabled; sync_day(%s, %s) skipped", employee_id, work_date)
            return

        punches, leaves, holidays = self._fetch_sources(
            employee_id, work_date, work_date, work_date.year, work_date.month
        )
        key = work_date.isoformat()
        window = group_by_date(punches).get(key)
        if window is None or not window.has_punch:
            return

        leave = build_leave_index(leaves, employee_id=employee_id, start=work_date, end=work_date).get(key)
        holiday = build_holiday_index(holidays).get(key)
        day = self._build_day(work_date, window, leave, holiday)

        try:
            self._cache.upsert(CachedDailyRow.from_day_status(employee_id, day))
        except Exception as e:
            raise CacheWriteError(f"Failed to sync daily attendance for {employee_id} on {key}") from e

    # ----- resolution -----

    def _build_day(
        self,
        work_date: date,
        window: Optional[DayWindow],
        leave: Optional[LeaveRecord],
        holiday: Optional[HolidayRecord],
    ) -> DayStatus:
        first_in = window.first_in if window else None
        last_out = window.last_out if window else None
        minutes = self._worked_minutes(window)

        ctx = DayContext(
            work_date=work_date,
            holiday=holiday,
            leave=leave,
            window=window,
            working_minutes=minutes,
        )
        code = self._resolver.resolve(ctx)

        return DayStatus(
            work_date=work_date,
            day_name=day_name(work_date),
            display_string=format_in_out_display(first_in, last_out),
            status_code=code,
            color=color_for(code),
            working_minutes=minutes,
            first_in=first_in,
            last_out=last_out,
        )

    def _worked_minutes(self, window: Optional[DayWindow]) -> int:
        if window is None or not window.is_complete:
            return 0
        if self._basis == WorkedTimeBasis.PAIRED and window.punches:
            return working_minutes_from_punches(window.punches)
        return working_minutes(window.first_in, window.last_out)

    # ----- data access -----

    def _ensure_employee(self, employee_id: int) -> None:
        if self._employees is None:
            return
        if not self._employees.exists(employee_id):
            raise NotFoundError("Employee not found")

    def _fetch_sources(
        self, employee_id: int, start: date, end: date, year: int, month: int
    ) -> tuple[Sequence[Punch], Sequence[LeaveRecord], Sequence[HolidayRecord]]:
        if not self._parallel_fetch:
            return (
                self._fetch_punches(employee_id, start, end),
                self._fetch_leaves(employee_id, start, end),
                self._fetch_holidays(year, month),
            )

        with ThreadPoolExecutor(max_workers=3) as pool:
            punches = pool.submit(self._fetch_punches, employee_id, start, end)
            leaves = pool.submit(self._fetch_leaves, employee_id, start, end)
            holidays = pool.submit(self._fetch_holidays, year, month)
            return punches.result(), leaves.result(), holidays.result()

    def _fetch_punches(self, employee_id: int, start: date, end: date) -> Sequence[Punch]:
        try:
            return list(self._punches.get_punches(employee_id=employee_id, start_date=start, end_date=end))
        except DomainError:
            raise
        except Exception as e:
            logger.exception("Punch source failed for employee %s (%s..%s)", employee_id, start, end)
            raise DataSourceError("Failed to fetch punch records") from e

    def _fetch_leaves(self, employee_id: int, start: date, end: date) -> Sequence[LeaveRecord]:
        if not self._leaves_enabled:
            logger.debug("Leave source disabled; treating leaves as empty")
            return []
        try:
            return list(self._leaves.get_leaves(employee_id=employee_id, start_date=start, end_date=end))
        except DomainError:
            raise
        except Exception as e:
            logger.exception("Leave source failed for employee %s (%s..%s)", employee_id, start, end)
            raise DataSourceError("Failed to fetch leave records") from e

    def _fetch_holidays(self, year: int, month: int) -> Sequence[HolidayRecord]:
        if not self._holidays_enabled:
            logger.debug("Holiday source disabled; treating holidays as empty")
            return []
        try:
            return list(self._holidays.get_holidays(year=year, month=month))
        except DomainError:
            raise
        except Exception as e:
            logger.exception("Holiday source failed for %04d-%02d", year, month)
            raise DataSourceError("Failed to fetch holiday records") from e

    def _persist_best_effort(self, employee_id: int, day: DayStatus) -> None:
        if self._cache is None:
            return
        try:
            self._cache.upsert(CachedDailyRow.from_day_status(employee_id, day))
        except Exception:
            logger.warning(
                "Daily cache write failed for employee %s on %s; returning computed calendar",
                employee_id,
                day.date_label,
                exc_info=True,
            )

    @staticmethod
    def _coerce_date(value: date | str) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return parse_iso_date(str(value).strip())
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")
