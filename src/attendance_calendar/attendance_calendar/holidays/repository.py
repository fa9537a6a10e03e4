from __future__ import annotations

from typing import Protocol, Sequence

from .model import HolidayRecord


class HolidaySource(Protocol):
    def get_holidays(self, *, year: int, month: int) -> Sequence[HolidayRecord]:
        raise NotImplementedError
