from datetime import date, datetime, time

from workhub_dashboard.attendance.calculator.standard_calculator import StandardWorkHoursCalculator
from workhub_dashboard.attendance.model import AttendanceRecord
from workhub_dashboard.core.enums import AttendanceStatus


def test_standard_calculator_uses_seconds():
    row = AttendanceRecord(
        work_date=date(2025, 1, 1),
        check_in_time=time(8, 0, 0),
        check_out_time=time(17, 45, 36),
        status=AttendanceStatus.NORMAL,
    )

    calc = StandardWorkHoursCalculator()
    assert calc.total_hours(row, date(2025, 1, 1), datetime(2025, 1, 2, 9, 0)) == 9.76


def test_check_out_instant_is_none_for_abandoned_shift():
    row = AttendanceRecord(
        work_date=date(2025, 1, 1),
        check_in_time=time(8, 0),
        check_out_time=None,
        status=AttendanceStatus.NORMAL,
    )

    assert StandardWorkHoursCalculator.check_out_instant(row, date(2025, 1, 1), datetime(2025, 1, 3, 9, 0)) is None
