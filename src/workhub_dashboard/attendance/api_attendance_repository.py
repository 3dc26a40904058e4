from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.validators import optional_float, optional_int
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def record_from_api(row: Any) -> Optional[AttendanceRecord]:
    """Validate one attendance JSON object into an AttendanceRecord.

    Rows without a usable workDate are dropped; every other malformed field
    degrades to "missing" so one bad row never breaks a whole report.
    """
    if not isinstance(row, dict):
        logger.warning(f"Skipping attendance row that is not an object: {row!r}")
        return None

    try:
        work_date = parse_iso_date(str(row.get("workDate") or ""))
    except ValueError:
        logger.warning(f"Skipping attendance row with invalid workDate: {row.get('workDate')!r}")
        return None

    check_in = parse_clock_time(row.get("checkInTime"))
    if row.get("checkInTime") and check_in is None:
        logger.warning(f"Invalid checkInTime on {work_date}: {row.get('checkInTime')!r}")
    check_out = parse_clock_time(row.get("checkOutTime"))
    if row.get("checkOutTime") and check_out is None:
        logger.warning(f"Invalid checkOutTime on {work_date}: {row.get('checkOutTime')!r}")

    return AttendanceRecord(
        work_date=work_date,
        check_in_time=check_in,
        check_out_time=check_out,
        status=AttendanceStatus.parse(row.get("statusCode")),
        work_hours=optional_float(row.get("workHours")),
        record_id=optional_int(row.get("id")),
        status_label=row.get("status"),
        note=row.get("notes"),
    )


class ApiAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def _records(self, payload: Any) -> list[AttendanceRecord]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning(f"Expected a list of attendance rows, got {type(payload).__name__}")
            return []
        records = [record_from_api(row) for row in payload]
        return [r for r in records if r is not None]

    def get_by_month(self, year: int, month: int) -> Sequence[AttendanceRecord]:
        payload = self._client.get_json("/attendance/me/month", params={"year": int(year), "month": int(month)})
        return self._records(payload)

    def get_by_period(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        payload = self._client.get_json(
            "/attendance/me/period",
            params={"startDate": start.strftime("%Y-%m-%d"), "endDate": end.strftime("%Y-%m-%d")},
        )
        return self._records(payload)

    def get_today(self) -> Optional[AttendanceRecord]:
        payload = self._client.get_json("/attendance/today")
        if not payload:
            return None
        return record_from_api(payload)
