"""Worked-time arithmetic and 12-hour display strings.

Known limitation: timestamps are rendered with their own wall-clock hour and
minute. No timezone conversion happens here, so the stored timestamps must
already be in the organization's local time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..core.enums import PunchType
from ..punches.model import Punch


def _round_minutes(seconds: float) -> int:
    # Half-up rounding; never negative.
    if seconds <= 0:
        return 0
    return int((seconds + 30) // 60)


def working_minutes(first_in: Optional[datetime], last_out: Optional[datetime]) -> int:
    if first_in is None or last_out is None:
        return 0
    return _round_minutes((last_out - first_in).total_seconds())


def working_minutes_from_punches(punches: Iterable[Punch]) -> int:
    """Sum of each IN to the next OUT.

    Repeated INs keep the earliest open one; an OUT with no open IN is ignored.
    """

    total_seconds = 0.0
    open_in: Optional[datetime] = None
    for punch in sorted(punches, key=lambda p: p.timestamp):
        if punch.punch_type == PunchType.IN:
            if open_in is None:
                open_in = punch.timestamp
        elif punch.punch_type == PunchType.OUT and open_in is not None:
            total_seconds += max((punch.timestamp - open_in).total_seconds(), 0)
            open_in = None
    return _round_minutes(total_seconds)


def format_clock_12h(value: Optional[datetime]) -> str:
    """e.g. 09:48 AM"""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    suffix = "PM" if value.hour >= 12 else "AM"
    return f"{hour:02d}:{value.minute:02d} {suffix}"


def format_in_out_display(first_in: Optional[datetime], last_out: Optional[datetime]) -> str:
    lines = []
    if first_in is not None:
        lines.append(f"IN {format_clock_12h(first_in)}")
    if last_out is not None:
        lines.append(f"OUT {format_clock_12h(last_out)}")
    return "\n".join(lines)
