from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime

from ..model import AttendanceRecord


class WorkHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def total_hours(self, record: AttendanceRecord, reference_date: date, now: datetime) -> float:
        raise NotImplementedError
