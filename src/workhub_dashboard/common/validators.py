from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_year(value, field_name: str = "year") -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} 값이 올바르지 않습니다")
    if year < 1900 or year > 9999:
        raise ValidationError(f"{field_name} 값이 범위를 벗어났습니다")
    return year


def require_month(value, field_name: str = "month") -> int:
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} 값이 올바르지 않습니다")
    if not 1 <= month <= 12:
        raise ValidationError(f"{field_name} 값은 1~12 사이여야 합니다")
    return month


def optional_float(value) -> Optional[float]:
    """Coerce an API number to float; None for missing, non-numeric or non-finite."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def optional_int(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
