from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import wall_clock_time
from ..core.constants import DEFAULT_STATUS_COLOR
from ..core.enums import DayStatusCode

STATUS_COLORS: dict[DayStatusCode, str] = {
    DayStatusCode.PRESENT: "#03be3c",
    DayStatusCode.ABSENT: "#ff0000",
    DayStatusCode.WEEKLY_OFF: "#097af3",
    DayStatusCode.PUBLIC_HOLIDAY: "#9796F2",
    DayStatusCode.RESTRICTED_HOLIDAY: "#C2977D",
    DayStatusCode.CASUAL_LEAVE: "#f9a597",
    DayStatusCode.SICK_LEAVE: "#f9a597",
    DayStatusCode.HALF_DAY: "#343C19",
    DayStatusCode.MISSING_PUNCH: "#ff3300",
}


def color_for(code: DayStatusCode) -> str:
    return STATUS_COLORS.get(code, DEFAULT_STATUS_COLOR)


@dataclass(frozen=True)
class DayStatus:
    """Resolved calendar cell for one employee on one date."""

    work_date: date
    day_name: str
    display_string: str
    status_code: DayStatusCode
    color: str
    working_minutes: int
    first_in: Optional[datetime] = None
    last_out: Optional[datetime] = None

    @property
    def date_label(self) -> str:
        return self.work_date.isoformat()


@dataclass(frozen=True)
class CachedDailyRow:
    """Durable mirror of a DayStatus, keyed by (employee_id, attendance_date)."""

    employee_id: int
    attendance_date: date
    day_name: str
    first_in_time: Optional[time]
    last_out_time: Optional[time]
    display_string: str
    status_code: DayStatusCode
    color: str
    working_minutes: int
    updated_at: Optional[datetime] = field(default=None, compare=False)

    @classmethod
    def from_day_status(cls, employee_id: int, day: DayStatus) -> "CachedDailyRow":
        return cls(
            employee_id=int(employee_id),
            attendance_date=day.work_date,
            day_name=day.day_name,
            first_in_time=wall_clock_time(day.first_in),
            last_out_time=wall_clock_time(day.last_out),
            display_string=day.display_string,
            status_code=day.status_code,
            color=day.color,
            working_minutes=int(day.working_minutes),
        )


@dataclass(frozen=True)
class CalendarData:
    employee_id: int
    year: int
    month: int
    table: list[DayStatus]
