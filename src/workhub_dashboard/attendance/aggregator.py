"""Attendance aggregation: pure functions from records to presentation stats.

Every function takes the reference clock (`now`) explicitly and performs no
I/O, so the same inputs always produce the same outputs. Missing or malformed
data degrades to zero hours for the affected day instead of failing the batch.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..core.constants import REGULAR_HOURS_PER_DAY, STANDARD_WORKDAY_MINUTES
from ..core.enums import WORKED_STATUSES, AttendanceStatus
from .calculator.base import WorkHoursCalculator
from .calculator.standard_calculator import StandardWorkHoursCalculator
from .model import AggregateSummary, AttendanceRecord, DerivedDayStat

_DEFAULT_CALCULATOR = StandardWorkHoursCalculator()


def compute_daily_hours(
    record: AttendanceRecord,
    reference_date: date,
    now: datetime,
    *,
    calculator: Optional[WorkHoursCalculator] = None,
) -> float:
    return (calculator or _DEFAULT_CALCULATOR).total_hours(record, reference_date, now)


def split_regular_overtime(total_hours: float) -> tuple[float, float]:
    """Return (regular, overtime); regular is capped at 8 hours."""
    regular = min(total_hours, REGULAR_HOURS_PER_DAY)
    overtime = max(0.0, total_hours - REGULAR_HOURS_PER_DAY)
    return regular, overtime


def aggregate_window(
    records: Iterable[AttendanceRecord],
    window_start: date,
    window_end: date,
    now: datetime,
    *,
    calculator: Optional[WorkHoursCalculator] = None,
) -> AggregateSummary:
    work_days = 0
    used_leave_days = 0
    total_hours = 0.0
    total_overtime = 0.0

    for r in records:
        if not window_start <= r.work_date <= window_end:
            continue

        # An unclosed past day contributes 0 hours but still counts as worked.
        if r.status in WORKED_STATUSES:
            work_days += 1
        elif r.status == AttendanceStatus.VACATION:
            used_leave_days += 1

        hours = compute_daily_hours(r, r.work_date, now, calculator=calculator)
        total_hours += hours
        total_overtime += max(0.0, hours - REGULAR_HOURS_PER_DAY)

    return AggregateSummary(
        work_days=work_days,
        total_work_hours=total_hours,
        total_overtime_hours=total_overtime,
        used_leave_days=used_leave_days,
    )


def build_daily_series(
    records: Iterable[AttendanceRecord],
    days: Sequence[date],
    now: datetime,
    *,
    calculator: Optional[WorkHoursCalculator] = None,
) -> list[DerivedDayStat]:
    """One stat per requested day, in the given order, zero-filled when no record."""
    by_date = {r.work_date: r for r in records}

    series = []
    for d in days:
        record = by_date.get(d)
        total = compute_daily_hours(record, d, now, calculator=calculator) if record else 0.0
        regular, overtime = split_regular_overtime(total)
        series.append(DerivedDayStat(date=d, regular_hours=regular, overtime_hours=overtime, total_hours=total))
    return series


def count_statuses(records: Iterable[AttendanceRecord]) -> dict[AttendanceStatus, int]:
    counts: dict[AttendanceStatus, int] = {}
    for r in records:
        counts[r.status] = counts.get(r.status, 0) + 1
    return counts


def elapsed_progress(record: Optional[AttendanceRecord], now: datetime) -> tuple[int, int]:
    """Elapsed whole minutes since check-in and progress (%) of a 9-hour day.

    The clock-in card evaluates the record against `now`'s calendar day.
    """
    if record is None or record.check_in_time is None:
        return 0, 0

    reference = now.date()
    check_in = datetime.combine(reference, record.check_in_time)
    check_out = StandardWorkHoursCalculator.check_out_instant(record, reference, now) or now

    seconds = (check_out - check_in).total_seconds()
    if seconds <= 0:
        return 0, 0

    minutes = int(seconds // 60)
    progress = min(100, round(minutes / STANDARD_WORKDAY_MINUTES * 100))
    return minutes, progress
