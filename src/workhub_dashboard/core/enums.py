from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role."""

    ADMIN = "ADMIN"
    USER = "USER"


class AttendanceStatus(str, Enum):
    """Attendance status codes assigned by the backend."""

    NORMAL = "NORMAL"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    ABSENT = "ABSENT"
    VACATION = "VACATION"
    OVERTIME = "OVERTIME"
    SICK_LEAVE = "SICK_LEAVE"
    BUSINESS_TRIP = "BUSINESS_TRIP"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().upper())
        except ValueError:
            return cls.UNKNOWN


WORKED_STATUSES = frozenset({AttendanceStatus.NORMAL, AttendanceStatus.LATE, AttendanceStatus.OVERTIME})

STATUS_LABELS = {
    AttendanceStatus.NORMAL: "정상 출근",
    AttendanceStatus.LATE: "지각",
    AttendanceStatus.EARLY_LEAVE: "조퇴",
    AttendanceStatus.ABSENT: "결근",
    AttendanceStatus.VACATION: "휴가",
    AttendanceStatus.OVERTIME: "연장 근무",
    AttendanceStatus.SICK_LEAVE: "병가",
    AttendanceStatus.BUSINESS_TRIP: "출장",
    AttendanceStatus.UNKNOWN: "알 수 없음",
}
