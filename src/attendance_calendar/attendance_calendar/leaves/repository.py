from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import LeaveRecord


class LeaveSource(Protocol):
    def get_leaves(self, *, employee_id: Optional[int], start_date: date, end_date: date) -> Sequence[LeaveRecord]:
        """Leaves overlapping [start_date, end_date].

        Implementations that cannot filter by employee return every leave in range.
        """

        raise NotImplementedError
