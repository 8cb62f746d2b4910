from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class IdentityBackend(Protocol):
    """Account and profile-document primitives of a remote identity service.

    Every method may raise RemoteError on its own; callers must not assume
    that a successful create_account implies a successful set_document.
    """

    def create_account(self, email: str, password: str) -> str:
        raise NotImplementedError

    def sign_in(self, email: str, password: str) -> str:
        raise NotImplementedError

    def sign_out(self) -> None:
        raise NotImplementedError

    def current_account_id(self) -> Optional[str]:
        raise NotImplementedError

    def get_document(self, account_id: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def set_document(self, account_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def update_document(self, account_id: str, updates: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def send_password_reset_email(self, email: str) -> None:
        raise NotImplementedError
