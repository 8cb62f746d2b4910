from __future__ import annotations

from ..core.constants import KEY_REMEMBER_ME, KEY_USER_EMAIL, KEY_USER_PASSWORD
from .model import SavedCredentials
from .store import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    def __init__(self):
        self._values: dict[str, object] = {}

    def save(self, email: str, password: str) -> None:
        self._values[KEY_USER_EMAIL] = email
        self._values[KEY_USER_PASSWORD] = password
        self._values[KEY_REMEMBER_ME] = True

    def clear(self) -> None:
        self._values.pop(KEY_USER_EMAIL, None)
        self._values.pop(KEY_USER_PASSWORD, None)
        self._values[KEY_REMEMBER_ME] = False

    def load(self) -> SavedCredentials:
        return SavedCredentials(
            email=str(self._values.get(KEY_USER_EMAIL) or ""),
            password=str(self._values.get(KEY_USER_PASSWORD) or ""),
            remember_me=bool(self._values.get(KEY_REMEMBER_ME, False)),
        )
