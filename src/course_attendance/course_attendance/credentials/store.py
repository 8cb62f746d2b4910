from __future__ import annotations

from typing import Protocol

from .model import SavedCredentials


class CredentialStore(Protocol):
    """Key-value storage for "remember me" credentials.

    Keys: user_email, user_password, remember_me, under one application namespace.
    """

    def save(self, email: str, password: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def load(self) -> SavedCredentials:
        raise NotImplementedError
