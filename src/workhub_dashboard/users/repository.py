from __future__ import annotations

from typing import Optional, Protocol

from .model import UserInfo


class UserRepository(Protocol):
    def get_me(self) -> Optional[UserInfo]:
        raise NotImplementedError
