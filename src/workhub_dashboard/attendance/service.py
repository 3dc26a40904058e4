from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import month_bounds, week_bounds, week_days
from ..common.formatting import format_clock, format_hours, round_hours
from ..core.constants import WEEKDAY_LABELS, WEEKLY_TARGET_HOURS
from ..core.enums import STATUS_LABELS
from ..leave.service import LeaveBalanceService
from ..users.repository import UserRepository
from .aggregator import aggregate_window, build_daily_series, count_statuses, elapsed_progress, split_regular_overtime
from .calculator.base import WorkHoursCalculator
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceDashboardService:
    """Builds the dashboard views (charts, cards) from attendance records.

    Every method receives `now` from the caller; nothing here reads the clock.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: Optional[UserRepository] = None,
        *,
        leave: Optional[LeaveBalanceService] = None,
        calculator: Optional[WorkHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._users = users
        self._leave = leave or LeaveBalanceService()
        self._calculator = calculator

    def _records_between(self, start: date, end: date) -> list[AttendanceRecord]:
        by_date = {r.work_date: r for r in self._attendance.get_by_period(start, end)}
        return [by_date[d] for d in sorted(by_date) if start <= d <= end]

    def weekly_chart(self, now: datetime) -> list[dict]:
        days = week_days(now.date())
        records = self._records_between(days[0], days[-1])
        series = build_daily_series(records, days, now, calculator=self._calculator)
        return [
            {
                "day": label,
                "date": stat.date.strftime("%Y-%m-%d"),
                "hours": round_hours(stat.regular_hours),
                "overtime": round_hours(stat.overtime_hours),
            }
            for label, stat in zip(WEEKDAY_LABELS, series)
        ]

    def monthly_summary(self, year: int, month: int, now: datetime) -> dict:
        start, end = month_bounds(year, month)
        records = self._attendance.get_by_month(year, month)
        summary = aggregate_window(records, start, end, now, calculator=self._calculator)
        return {
            "year": int(year),
            "month": int(month),
            "work_days": summary.work_days,
            "total_work_hours": round_hours(summary.total_work_hours),
            "total_overtime_hours": round_hours(summary.total_overtime_hours),
            "used_leave_days": summary.used_leave_days,
            "cards": [
                {"label": "총 근무 일수", "value": f"{summary.work_days}일"},
                {"label": "총 근무 시간", "value": format_hours(summary.total_work_hours)},
                {"label": "연장 근무", "value": format_hours(summary.total_overtime_hours)},
                {"label": "휴가 사용", "value": f"{summary.used_leave_days}일"},
            ],
        }

    def work_trend(self, year: int, month: int) -> list[dict]:
        """Daily bars for days the backend reported hours for."""
        records = sorted(
            (r for r in self._attendance.get_by_month(year, month) if r.work_hours is not None),
            key=lambda r: r.work_date,
        )
        out = []
        for r in records:
            regular, overtime = split_regular_overtime(r.work_hours or 0.0)
            out.append(
                {
                    "date": r.work_date.strftime("%Y-%m-%d"),
                    "label": f"{r.work_date.day}일",
                    "hours": round_hours(regular),
                    "overtime": round_hours(overtime),
                }
            )
        return out

    def status_breakdown(self, year: int, month: int) -> list[dict]:
        counts = count_statuses(self._attendance.get_by_month(year, month))
        return [
            {"status": status.value, "name": STATUS_LABELS.get(status, status.value), "value": count}
            for status, count in counts.items()
        ]

    def today_status(self, now: datetime) -> dict:
        record = self._attendance.get_today()
        minutes, progress = elapsed_progress(record, now)
        checked_in = record is not None and record.check_in_time is not None
        return {
            "checked_in": checked_in,
            "checked_out": checked_in and record.check_out_time is not None,
            "check_in": format_clock(record.check_in_time) if record else "-",
            "check_out": format_clock(record.check_out_time) if record else "-",
            "elapsed_hours": minutes // 60,
            "elapsed_minutes": minutes % 60,
            "progress": progress,
        }

    def work_and_leave(self, now: datetime) -> dict:
        start, end = week_bounds(now.date())
        records = self._records_between(start, end)
        summary = aggregate_window(records, start, end, now, calculator=self._calculator)

        user = self._users.get_me() if self._users else None
        records_ytd: list[AttendanceRecord] = []
        if user and user.join_date and not self._leave.has_backend_balance(user):
            records_ytd = self._records_between(date(now.year, 1, 1), now.date())
        balance = self._leave.resolve(user, today=now.date(), records=records_ytd)
        return {
            "weekly_hours": format_hours(summary.total_work_hours),
            "weekly_target": f"{WEEKLY_TARGET_HOURS}h",
            "leave": {
                "total": balance.total,
                "used": balance.used,
                "remaining": balance.remaining,
                "estimated": balance.estimated,
            },
        }
