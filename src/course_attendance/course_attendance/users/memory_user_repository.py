from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Sequence[User] = ()):
        self._users: list[User] = list(users)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.user_id == user_id), None)

    def get_by_email(self, email: str) -> Optional[User]:
        # Exact, case-sensitive match; first registered wins.
        return next((u for u in self._users if u.email == email), None)

    def add(self, user: User) -> None:
        self._users.append(user)

    def list_all(self) -> Sequence[User]:
        return tuple(self._users)

    def list_by_role(self, role: Role) -> Sequence[User]:
        return tuple(u for u in self._users if u.role == role)
