from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..model import AttendanceRecord
from .base import WorkHoursCalculator


class StandardWorkHoursCalculator(WorkHoursCalculator):
    """Standard rule: backend hours if given, else (out - in) with overnight support.

    - open shift today runs until `now`
    - open shift on a past day counts as 0
    - never below 0
    """

    def total_hours(self, record: AttendanceRecord, reference_date: date, now: datetime) -> float:
        if record.work_hours:
            return float(record.work_hours)
        if record.check_in_time is None:
            return 0.0

        check_in = datetime.combine(reference_date, record.check_in_time)
        check_out = self.check_out_instant(record, reference_date, now)
        if check_out is None:
            return 0.0

        return max((check_out - check_in).total_seconds() / 3600, 0.0)

    @staticmethod
    def check_out_instant(record: AttendanceRecord, reference_date: date, now: datetime) -> Optional[datetime]:
        if record.check_out_time is not None:
            check_out = datetime.combine(reference_date, record.check_out_time)
            if record.check_in_time is not None and record.check_out_time < record.check_in_time:
                check_out += timedelta(days=1)
            return check_out
        if reference_date == now.date():
            return now
        return None
