from __future__ import annotations

from datetime import date

import pytest

from workhub_dashboard.attendance.model import AttendanceRecord
from workhub_dashboard.core.enums import AttendanceStatus, Role
from workhub_dashboard.leave.service import LeaveBalanceService, completed_months, estimate_annual_leave
from workhub_dashboard.users.model import UserInfo


def make_user(**kwargs) -> UserInfo:
    base = dict(user_id=1, employee_id=10, employee_no="E-10", name="김사원", role=Role.USER)
    base.update(kwargs)
    return UserInfo(**base)


def vacation(day: date) -> AttendanceRecord:
    return AttendanceRecord(work_date=day, check_in_time=None, check_out_time=None, status=AttendanceStatus.VACATION)


def test_backend_balance_is_authoritative():
    user = make_user(join_date=date(2015, 1, 1), total_leave=15, used_leave=3, remaining_leave=12)
    balance = LeaveBalanceService().resolve(user, today=date(2024, 5, 1), records=[vacation(date(2024, 4, 1))])

    assert (balance.total, balance.used, balance.remaining) == (15, 3, 12)
    assert balance.estimated is False


def test_backend_total_without_remaining_derives_remaining():
    user = make_user(total_leave=15, used_leave=4)
    balance = LeaveBalanceService().resolve(user, today=date(2024, 5, 1))

    assert balance.remaining == 11
    assert balance.estimated is False


def test_estimate_when_backend_has_no_balance():
    user = make_user(join_date=date(2021, 3, 2))
    records = [vacation(date(2024, 2, 1)), vacation(date(2024, 2, 2))]

    balance = LeaveBalanceService().resolve(user, today=date(2024, 5, 1), records=records)

    assert balance.estimated is True
    assert balance.total == 16
    assert balance.used == 2
    assert balance.remaining == 14


def test_unknown_user_gives_empty_estimate():
    balance = LeaveBalanceService().resolve(None, today=date(2024, 5, 1))
    assert (balance.total, balance.used, balance.remaining, balance.estimated) == (None, None, None, True)


@pytest.mark.parametrize(
    "join, today, expected",
    [
        (date(2024, 1, 15), date(2024, 5, 14), 3),
        (date(2024, 1, 15), date(2024, 5, 15), 4),
        (date(2023, 1, 1), date(2023, 12, 31), 11),
        (date(2022, 5, 1), date(2024, 5, 1), 15),
        (date(2020, 5, 1), date(2024, 5, 1), 16),
        (date(2014, 5, 1), date(2024, 5, 1), 19),
    ],
)
def test_estimate_annual_leave(join, today, expected):
    assert estimate_annual_leave(join, today) == expected


def test_completed_months_never_negative():
    assert completed_months(date(2024, 5, 1), date(2024, 4, 1)) == 0
