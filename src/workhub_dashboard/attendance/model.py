from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per work day."""

    work_date: date
    check_in_time: Optional[time]
    check_out_time: Optional[time]
    status: AttendanceStatus
    work_hours: Optional[float] = None
    record_id: Optional[int] = None
    status_label: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class DerivedDayStat:
    """Per-day hours split, one per requested calendar day."""

    date: date
    regular_hours: float
    overtime_hours: float
    total_hours: float


@dataclass(frozen=True)
class AggregateSummary:
    """Totals over a window (week or month)."""

    work_days: int = 0
    total_work_hours: float = 0.0
    total_overtime_hours: float = 0.0
    used_leave_days: int = 0
