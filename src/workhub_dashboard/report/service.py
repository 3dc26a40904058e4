from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.aggregator import aggregate_window, compute_daily_hours, split_regular_overtime
from ..attendance.calculator.base import WorkHoursCalculator
from ..attendance.calculator.standard_calculator import StandardWorkHoursCalculator
from ..attendance.model import AggregateSummary
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..common.formatting import format_clock, round_hours
from ..core.enums import STATUS_LABELS

REPORT_FIELDS = [
    "work_date",
    "check_in",
    "check_out",
    "status",
    "total_hours",
    "regular_hours",
    "overtime_hours",
    "note",
]


@dataclass(frozen=True)
class MonthlyReport:
    year: int
    month: int
    rows: list[dict]
    summary: AggregateSummary


class MonthlyReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WorkHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardWorkHoursCalculator()

    def build_monthly_report(self, *, year: int, month: int, now: datetime) -> MonthlyReport:
        start, end = month_bounds(year, month)
        records = sorted(
            (r for r in self._attendance.get_by_month(year, month) if start <= r.work_date <= end),
            key=lambda r: r.work_date,
        )

        rows: list[dict] = []
        for r in records:
            total = compute_daily_hours(r, r.work_date, now, calculator=self._calculator)
            regular, overtime = split_regular_overtime(total)
            rows.append(
                {
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "check_in": format_clock(r.check_in_time),
                    "check_out": format_clock(r.check_out_time),
                    "status": r.status_label or STATUS_LABELS.get(r.status, r.status.value),
                    "total_hours": round_hours(total),
                    "regular_hours": round_hours(regular),
                    "overtime_hours": round_hours(overtime),
                    "note": r.note or "",
                }
            )

        summary = aggregate_window(records, start, end, now, calculator=self._calculator)
        return MonthlyReport(year=int(year), month=int(month), rows=rows, summary=summary)

    @staticmethod
    def to_csv(report: MonthlyReport) -> bytes:
        """CSV bytes (UTF-8 with BOM so spreadsheet apps detect the encoding)."""
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in report.rows:
            writer.writerow(row)
        return out.getvalue().encode("utf-8-sig")
