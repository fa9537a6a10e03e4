from __future__ import annotations

from ...core.constants import FULL_DAY_MINUTES
from ...core.enums import DayStatusCode, HalfDayMode
from .base import HalfDayStrategy


class DurationHalfDayStrategy(HalfDayStrategy):
    """Short worked days (below full_day_minutes) count as CL/2 even without leave."""

    mode = HalfDayMode.DURATION

    def __init__(self, full_day_minutes: int = FULL_DAY_MINUTES):
        self.full_day_minutes = int(full_day_minutes)

    def classify_worked_day(self, *, working_minutes: int) -> DayStatusCode:
        if working_minutes < self.full_day_minutes:
            return DayStatusCode.HALF_DAY
        return DayStatusCode.PRESENT
