from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class UserInfo:
    """Domain entity: the signed-in employee.

    Leave fields are filled only when the backend provides them.
    """

    user_id: int
    employee_id: Optional[int]
    employee_no: str
    name: str
    role: Role
    department: Optional[str] = None
    position: Optional[str] = None
    join_date: Optional[date] = None
    total_leave: Optional[float] = None
    used_leave: Optional[float] = None
    remaining_leave: Optional[float] = None
