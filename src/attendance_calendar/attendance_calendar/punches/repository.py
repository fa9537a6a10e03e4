from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Punch


class PunchSource(Protocol):
    """Read side of the punch log.

    This source is mandatory: any failure aborts the calendar request.
    """

    def get_punches(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[Punch]:
        raise NotImplementedError
