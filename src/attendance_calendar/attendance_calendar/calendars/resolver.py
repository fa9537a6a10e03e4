"""Day status precedence.

The order of PRECEDENCE_RULES is the contract: holiday, leave, weekly off,
present, then the missing-punch/absent fallback. The first rule whose
predicate matches decides the day. Reordering the tuple changes every
historical calendar.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence

from ..core.enums import DayStatusCode
from ..holidays.model import HolidayRecord
from ..leaves.model import LeaveRecord
from ..punches.model import DayWindow
from .strategies.base import HalfDayStrategy
from .strategies.leave_strategy import LeaveHalfDayStrategy

SUNDAY = 6


def is_weekly_off(work_date: date) -> bool:
    """Sunday is the only weekly-off day."""
    return work_date.weekday() == SUNDAY


@dataclass(frozen=True)
class DayContext:
    """Every signal the resolver may consult for one date."""

    work_date: date
    holiday: Optional[HolidayRecord] = None
    leave: Optional[LeaveRecord] = None
    window: Optional[DayWindow] = None
    working_minutes: int = 0

    @property
    def has_complete_attendance(self) -> bool:
        return self.window is not None and self.window.is_complete

    @property
    def has_any_punch(self) -> bool:
        return self.window is not None and self.window.has_punch


@dataclass(frozen=True)
class PrecedenceRule:
    name: str
    applies: Callable[[DayContext], bool]
    classify: Callable[[DayContext, HalfDayStrategy], DayStatusCode]


def _holiday_code(ctx: DayContext, _: HalfDayStrategy) -> DayStatusCode:
    if ctx.holiday.is_restricted:
        return DayStatusCode.RESTRICTED_HOLIDAY
    return DayStatusCode.PUBLIC_HOLIDAY


def _leave_code(ctx: DayContext, _: HalfDayStrategy) -> DayStatusCode:
    # Swiped in and out on a leave day: both signals are kept as a half-day.
    if ctx.has_complete_attendance:
        return DayStatusCode.HALF_DAY
    if ctx.leave.is_sick:
        return DayStatusCode.SICK_LEAVE
    return DayStatusCode.CASUAL_LEAVE


def _worked_code(ctx: DayContext, strategy: HalfDayStrategy) -> DayStatusCode:
    return strategy.classify_worked_day(working_minutes=ctx.working_minutes)


def _fallback_code(ctx: DayContext, _: HalfDayStrategy) -> DayStatusCode:
    if ctx.has_any_punch:
        return DayStatusCode.MISSING_PUNCH
    return DayStatusCode.ABSENT


PRECEDENCE_RULES: tuple[PrecedenceRule, ...] = (
    PrecedenceRule("holiday", lambda ctx: ctx.holiday is not None, _holiday_code),
    PrecedenceRule("leave", lambda ctx: ctx.leave is not None, _leave_code),
    PrecedenceRule("weekly_off", lambda ctx: is_weekly_off(ctx.work_date), lambda ctx, _: DayStatusCode.WEEKLY_OFF),
    PrecedenceRule("present", lambda ctx: ctx.has_complete_attendance, _worked_code),
    PrecedenceRule("fallback", lambda ctx: True, _fallback_code),
)


class DayStatusResolver:
    def __init__(
        self,
        half_day_strategy: Optional[HalfDayStrategy] = None,
        *,
        rules: Sequence[PrecedenceRule] = PRECEDENCE_RULES,
    ):
        self._strategy = half_day_strategy or LeaveHalfDayStrategy()
        self._rules = tuple(rules)

    def matching_rule(self, ctx: DayContext) -> PrecedenceRule:
        for rule in self._rules:
            if rule.applies(ctx):
                return rule
        raise LookupError(f"No precedence rule matched {ctx.work_date}")

    def resolve(self, ctx: DayContext) -> DayStatusCode:
        return self.matching_rule(ctx).classify(ctx, self._strategy)
