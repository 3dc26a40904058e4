from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.client import ApiClient
from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.calculator.base import WorkHoursCalculator
from .attendance.calculator.standard_calculator import StandardWorkHoursCalculator
from .attendance.service import AttendanceDashboardService
from .core.constants import DEFAULT_API_TIMEOUT, DEFAULT_SESSION_COOKIE
from .leave.service import LeaveBalanceService
from .report.service import MonthlyReportService
from .users.api_user_repository import ApiUserRepository


@dataclass(frozen=True)
class RequestServices:
    """Services bound to one caller's upstream session."""

    attendance_repo: ApiAttendanceRepository
    users_repo: ApiUserRepository
    dashboard_service: AttendanceDashboardService
    report_service: MonthlyReportService


@dataclass(frozen=True)
class Container:
    api_client: ApiClient
    leave_service: LeaveBalanceService
    calculator: WorkHoursCalculator
    session_cookie_name: str = DEFAULT_SESSION_COOKIE

    def for_session(self, session_cookie: Optional[str]) -> RequestServices:
        client = self.api_client.with_session_cookie(session_cookie)
        attendance_repo = ApiAttendanceRepository(client)
        users_repo = ApiUserRepository(client)
        return RequestServices(
            attendance_repo=attendance_repo,
            users_repo=users_repo,
            dashboard_service=AttendanceDashboardService(
                attendance_repo, users_repo, leave=self.leave_service, calculator=self.calculator
            ),
            report_service=MonthlyReportService(attendance_repo, calculator=self.calculator),
        )


def build_container(*, api_config: dict) -> Container:
    cookie_name = str(api_config.get("cookie_name") or DEFAULT_SESSION_COOKIE)
    api_client = ApiClient(
        str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT)),
        cookie_name=cookie_name,
    )
    return Container(
        api_client=api_client,
        leave_service=LeaveBalanceService(),
        calculator=StandardWorkHoursCalculator(),
        session_cookie_name=cookie_name,
    )
