"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

REGULAR_HOURS_PER_DAY = 8.0
STANDARD_WORKDAY_MINUTES = 540
WEEKLY_TARGET_HOURS = 40
DEFAULT_API_TIMEOUT = 10
DEFAULT_SESSION_COOKIE = "JSESSIONID"

WEEKDAY_LABELS = ("월", "화", "수", "목", "금", "토", "일")
