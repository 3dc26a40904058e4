from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Read access to the logged-in employee's attendance records."""

    def get_by_month(self, year: int, month: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_period(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_today(self) -> Optional[AttendanceRecord]:
        """Today's record, or None when the employee has not checked in."""

        raise NotImplementedError
