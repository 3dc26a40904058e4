from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..users.model import UserInfo
from .model import LeaveBalance


def completed_months(start: date, end: date) -> int:
    """Whole calendar months from `start` to `end` (0 if end precedes start)."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(months, 0)


def estimate_annual_leave(join_date: date, today: date) -> int:
    """Statutory approximation: 1 day per month in year one (max 11), then 15 + 1 per 2 years."""
    months = completed_months(join_date, today)
    years = months // 12
    if years < 1:
        return min(months, 11)
    return 15 + (years - 1) // 2


class LeaveBalanceService:
    @staticmethod
    def has_backend_balance(user: Optional[UserInfo]) -> bool:
        return bool(user) and (user.total_leave is not None or user.remaining_leave is not None)

    def resolve(
        self,
        user: Optional[UserInfo],
        *,
        today: date,
        records: Iterable[AttendanceRecord] = (),
    ) -> LeaveBalance:
        """Backend leave figures win; otherwise estimate from join date and VACATION days."""
        if self.has_backend_balance(user):
            used = user.used_leave
            remaining = user.remaining_leave
            if remaining is None and user.total_leave is not None:
                remaining = max(user.total_leave - (used or 0), 0)
            return LeaveBalance(total=user.total_leave, used=used, remaining=remaining)

        if not user or not user.join_date:
            return LeaveBalance(total=None, used=None, remaining=None, estimated=True)

        total = float(estimate_annual_leave(user.join_date, today))
        used = float(sum(1 for r in records if r.status == AttendanceStatus.VACATION))
        return LeaveBalance(total=total, used=used, remaining=max(total - used, 0.0), estimated=True)
