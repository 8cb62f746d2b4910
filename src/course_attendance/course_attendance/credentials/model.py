from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SavedCredentials:
    email: str = ""
    password: str = ""
    remember_me: bool = False

    @property
    def can_auto_login(self) -> bool:
        return self.remember_me and bool(self.email) and bool(self.password)
