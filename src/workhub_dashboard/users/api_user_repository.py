from __future__ import annotations

import logging
from typing import Any, Optional

from ..api.client import ApiClient
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_float, optional_int
from ..core.enums import Role
from .model import UserInfo
from .repository import UserRepository

logger = logging.getLogger(__name__)


def user_from_api(row: Any) -> Optional[UserInfo]:
    if not isinstance(row, dict):
        return None

    join_date = None
    if row.get("joinDate"):
        try:
            join_date = parse_iso_date(str(row["joinDate"])[:10])
        except ValueError:
            logger.warning(f"Invalid joinDate for user {row.get('id')}: {row.get('joinDate')!r}")

    role = Role.ADMIN if str(row.get("role") or "").upper() == Role.ADMIN.value else Role.USER

    return UserInfo(
        user_id=optional_int(row.get("id")) or 0,
        employee_id=optional_int(row.get("employeeId")),
        employee_no=str(row.get("employeeNo") or ""),
        name=str(row.get("name") or ""),
        role=role,
        department=row.get("department"),
        position=row.get("position"),
        join_date=join_date,
        total_leave=optional_float(row.get("totalLeave")),
        used_leave=optional_float(row.get("usedLeave")),
        remaining_leave=optional_float(row.get("remainingLeave")),
    )


class ApiUserRepository(UserRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_me(self) -> Optional[UserInfo]:
        return user_from_api(self._client.get_json("/userinfo/me"))
