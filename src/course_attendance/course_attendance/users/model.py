from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can sign in.

    The password is kept as entered; this store does no hashing.
    """

    user_id: str
    name: str
    email: str
    password: str
    role: Role

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT

    @property
    def is_instructor(self) -> bool:
        return self.role == Role.INSTRUCTOR
