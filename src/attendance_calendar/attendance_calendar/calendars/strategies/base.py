from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DayStatusCode, HalfDayMode


class HalfDayStrategy(ABC):
    """Strategy Pattern: classify a fully punched day that no leave covers.

    Leave-driven half-days are decided by the leave rule before any strategy
    runs, so a leave record on the date always wins.
    """

    mode: HalfDayMode

    @abstractmethod
    def classify_worked_day(self, *, working_minutes: int) -> DayStatusCode:
        raise NotImplementedError
