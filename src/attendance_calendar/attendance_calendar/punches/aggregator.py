from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date, to_date_key
from ..core.enums import PunchType
from .model import DayWindow, Punch


def _punch_type(punch: Punch) -> Optional[PunchType]:
    value = punch.punch_type
    if isinstance(value, PunchType):
        return value
    try:
        return PunchType(str(value).strip().upper())
    except ValueError:
        return None


def group_by_date(punches: Iterable[Punch]) -> dict[str, DayWindow]:
    """Collapse a list of punches into one DayWindow per date.

    Input order does not matter. first_in is the earliest IN and last_out the
    latest OUT of each date. Punches of unknown type are ignored; a date whose
    punches are all of unknown type does not appear in the result.

    A latest OUT that precedes the earliest IN cannot close the window, so it
    is dropped and the day reads as a missing punch.
    """

    by_date: dict[str, list[Punch]] = defaultdict(list)
    for punch in punches:
        if _punch_type(punch) is None:
            continue
        by_date[to_date_key(punch.work_date)].append(punch)

    windows: dict[str, DayWindow] = {}
    for key, day_punches in by_date.items():
        ins = [p.timestamp for p in day_punches if _punch_type(p) == PunchType.IN]
        outs = [p.timestamp for p in day_punches if _punch_type(p) == PunchType.OUT]
        first_in = min(ins) if ins else None
        last_out = max(outs) if outs else None
        if first_in is not None and last_out is not None and last_out < first_in:
            last_out = None

        windows[key] = DayWindow(
            work_date=parse_iso_date(key),
            first_in=first_in,
            last_out=last_out,
            punches=tuple(sorted(day_punches, key=lambda p: p.timestamp)),
        )
    return windows
