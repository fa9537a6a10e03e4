from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import parse_option
from ..core.constants import FULL_DAY_MINUTES
from ..core.enums import HalfDayMode
from .strategies.base import HalfDayStrategy
from .strategies.duration_strategy import DurationHalfDayStrategy
from .strategies.leave_strategy import LeaveHalfDayStrategy


@dataclass
class HalfDayStrategyFactory:
    """Factory Pattern: pick the half-day strategy from configuration."""

    full_day_minutes: int = FULL_DAY_MINUTES

    def for_mode(self, mode: HalfDayMode | str | None) -> HalfDayStrategy:
        if mode is None:
            return LeaveHalfDayStrategy()
        mode = parse_option(HalfDayMode, mode, "half-day mode")

        if mode == HalfDayMode.DURATION:
            return DurationHalfDayStrategy(self.full_day_minutes)
        return LeaveHalfDayStrategy()
