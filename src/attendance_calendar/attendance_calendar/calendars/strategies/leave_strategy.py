from __future__ import annotations

from ...core.enums import DayStatusCode, HalfDayMode
from .base import HalfDayStrategy


class LeaveHalfDayStrategy(HalfDayStrategy):
    """Half-days come only from leave records; every complete punch pair is P."""

    mode = HalfDayMode.LEAVE

    def classify_worked_day(self, *, working_minutes: int) -> DayStatusCode:
        return DayStatusCode.PRESENT
