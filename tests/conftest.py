from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

import pytest

from src.course_attendance.course_attendance.container import build_container
from src.course_attendance.course_attendance.core.exceptions import RemoteError
from src.course_attendance.course_attendance.credentials.memory_store import InMemoryCredentialStore


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeIdentityBackend:
    """In-memory stand-in for the remote identity service."""

    def __init__(self):
        self.accounts: dict[str, tuple[str, str]] = {}
        self.documents: dict[str, dict[str, Any]] = {}
        self.reset_requests: list[str] = []
        self.fail_with: dict[str, str] = {}
        self.current: Optional[str] = None

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_with:
            raise RemoteError(self.fail_with[operation])

    def create_account(self, email: str, password: str) -> str:
        self._maybe_fail("create_account")
        if email in self.accounts:
            raise RemoteError("The email address is already in use by another account")
        account_id = f"acc-{len(self.accounts) + 1}"
        self.accounts[email] = (account_id, password)
        self.current = account_id
        return account_id

    def sign_in(self, email: str, password: str) -> str:
        self._maybe_fail("sign_in")
        if email not in self.accounts:
            raise RemoteError("There is no account for this email")
        account_id, stored = self.accounts[email]
        if stored != password:
            raise RemoteError("The password is invalid")
        self.current = account_id
        return account_id

    def sign_out(self) -> None:
        self.current = None

    def current_account_id(self) -> Optional[str]:
        return self.current

    def get_document(self, account_id: str) -> Optional[dict[str, Any]]:
        self._maybe_fail("get_document")
        doc = self.documents.get(account_id)
        return dict(doc) if doc is not None else None

    def set_document(self, account_id: str, data: Mapping[str, Any]) -> None:
        self._maybe_fail("set_document")
        self.documents[account_id] = dict(data)

    def update_document(self, account_id: str, updates: Mapping[str, Any]) -> None:
        self._maybe_fail("update_document")
        if account_id not in self.documents:
            raise RemoteError("Profile document not found")
        self.documents[account_id].update(updates)

    def send_password_reset_email(self, email: str) -> None:
        self._maybe_fail("send_password_reset_email")
        if email not in self.accounts:
            raise RemoteError("There is no account for this email")
        self.reset_requests.append(email)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 2, 2, 9, 30, 0))


@pytest.fixture
def credentials() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def identity_backend() -> FakeIdentityBackend:
    return FakeIdentityBackend()


@pytest.fixture
def make_container(clock, credentials):
    def _make(**settings):
        return build_container(settings=settings, clock=clock, credentials=credentials)

    return _make


@pytest.fixture
def container(make_container):
    return make_container()


@pytest.fixture
def store(container):
    return container.store
