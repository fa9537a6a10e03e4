from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Loại sự kiện chấm công thô."""

    IN = "IN"
    OUT = "OUT"


class DayStatusCode(str, Enum):
    """Mã trạng thái ngày trên lịch chấm công."""

    PUBLIC_HOLIDAY = "PH"
    RESTRICTED_HOLIDAY = "RH"
    CASUAL_LEAVE = "CL"
    SICK_LEAVE = "SL"
    HALF_DAY = "CL/2"
    WEEKLY_OFF = "WO"
    PRESENT = "P"
    ABSENT = "A"
    MISSING_PUNCH = "MP"


class HalfDayMode(str, Enum):
    """Which rule may turn a worked day into a half-day."""

    LEAVE = "leave"
    DURATION = "duration"


class WorkedTimeBasis(str, Enum):
    """SPAN: first IN to last OUT. PAIRED: sum of each IN to the next OUT."""

    SPAN = "span"
    PAIRED = "paired"


class PunchSourceKind(str, Enum):
    PUNCHES = "punches"
    SWIPES = "swipes"
