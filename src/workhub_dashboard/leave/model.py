from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LeaveBalance:
    """Annual leave balance in days.

    `estimated` is True when figures were derived client-side because the
    backend did not provide them.
    """

    total: Optional[float]
    used: Optional[float]
    remaining: Optional[float]
    estimated: bool = False
