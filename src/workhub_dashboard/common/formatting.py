from __future__ import annotations


def round_hours(hours: float) -> float:
    """One decimal place, for charts and tables only."""
    return round(float(hours or 0), 1)


def format_hours(hours: float) -> str:
    """Render decimal hours as e.g. ``7h 30m``."""
    total_minutes = round(max(float(hours or 0), 0.0) * 60)
    h, m = divmod(int(total_minutes), 60)
    return f"{h}h {m}m"


def format_clock(value) -> str:
    return value.strftime("%H:%M") if value else "-"
