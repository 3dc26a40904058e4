from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional

_CLOCK_FORMATS = ("%H:%M:%S", "%H:%M", "%H:%M:%S.%f")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value) -> Optional[time]:
    """Parse HH:MM or HH:MM:SS into a time of day.

    Returns None for empty or malformed values.
    """
    if isinstance(value, time):
        return value
    v = str(value or "").strip()
    if not v:
        return None
    for fmt in _CLOCK_FORMATS:
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    return None


def now_local() -> datetime:
    """Current local time.

    Note: Only the HTTP layer reads the clock; everything below it takes `now`.
    """
    return datetime.now()


def week_days(reference: date) -> list[date]:
    """Seven dates of the ISO week (Monday first) containing `reference`."""
    monday = reference - timedelta(days=reference.weekday())
    return [monday + timedelta(days=i) for i in range(7)]


def week_bounds(reference: date) -> tuple[date, date]:
    days = week_days(reference)
    return days[0], days[-1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def month_days(year: int, month: int) -> list[date]:
    start, end = month_bounds(year, month)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]
