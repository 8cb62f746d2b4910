from __future__ import annotations

import asyncio
import threading
from typing import Optional

import structlog

from ..common.validators import require_all_filled
from ..core.constants import MSG_PROFILE_UPDATED, MSG_RESET_EMAIL_SENT
from ..core.enums import ErrorKind, parse_role
from ..core.exceptions import DomainError, ValidationError
from ..core.results import AuthResult, Failure, Loading, OperationResult, Success
from .backend import IdentityBackend
from .model import UserProfile

logger = structlog.get_logger(__name__)

_UNSET = object()


def categorize_login_error(message: str) -> str:
    """Turn a backend failure into the short message shown on the login form."""
    lowered = (message or "").lower()
    if "password" in lowered:
        return "Invalid password"
    if "email" in lowered:
        return "Invalid email"
    if "network" in lowered:
        return "Network error"
    return message or "Login failed"


class RemoteAuthManager:
    """Account orchestration over a remote identity service.

    Each call takes a ticket from a monotonic counter. When the call
    finishes it only writes ``auth_state``/``current_profile`` if no newer
    call (or logout) has started meanwhile, so a slow stale response cannot
    overwrite fresher state. In-flight backend calls are not cancelled.
    """

    def __init__(self, backend: IdentityBackend):
        self._backend = backend
        self._seq = 0
        self._lock = threading.Lock()
        self._auth_state: Optional[AuthResult] = None
        self._current_profile: Optional[UserProfile] = None

    @property
    def auth_state(self) -> Optional[AuthResult]:
        return self._auth_state

    @property
    def current_profile(self) -> Optional[UserProfile]:
        return self._current_profile

    def is_logged_in(self) -> bool:
        return self._backend.current_account_id() is not None

    def _begin(self, *, loading: bool = True) -> int:
        with self._lock:
            self._seq += 1
            if loading:
                self._auth_state = Loading()
            return self._seq

    def _finish(self, ticket: int, result: OperationResult, *, profile=_UNSET, track_state: bool = True) -> OperationResult:
        with self._lock:
            if ticket != self._seq:
                logger.info("remote_result_discarded", ticket=ticket, latest=self._seq)
                return result
            if track_state:
                self._auth_state = result
            if profile is not _UNSET:
                self._current_profile = profile
            return result

    async def _load_profile(self, account_id: str) -> Optional[UserProfile]:
        try:
            doc = await asyncio.to_thread(self._backend.get_document, account_id)
        except DomainError:
            logger.exception("profile_load_failed", account_id=account_id)
            return None
        if doc is None:
            return None
        return UserProfile.from_document(account_id, doc)

    async def register(
        self,
        *,
        email: str,
        password: str,
        name: str,
        role: str,
        student_number: str = "",
        department: str = "",
    ) -> OperationResult:
        ticket = self._begin()
        try:
            require_all_filled(email, password, name)
            try:
                parsed_role = parse_role(role)
            except ValueError as exc:
                raise ValidationError(str(exc)) from exc

            account_id = await asyncio.to_thread(self._backend.create_account, email, password)
            profile = UserProfile(
                account_id=account_id,
                email=email,
                name=name,
                role=parsed_role.value,
                student_number=student_number,
                department=department,
            )
            await asyncio.to_thread(self._backend.set_document, account_id, profile.to_document())
        except DomainError as exc:
            logger.warning("remote_register_failed", email=email, error=exc.message)
            return self._finish(ticket, Failure(exc.kind, exc.message or "Registration failed"))

        logger.info("remote_register_success", account_id=account_id)
        return self._finish(ticket, Success(), profile=profile)

    async def login(self, email: str, password: str) -> OperationResult:
        ticket = self._begin()
        try:
            require_all_filled(email, password)
            account_id = await asyncio.to_thread(self._backend.sign_in, email, password)
        except ValidationError as exc:
            return self._finish(ticket, Failure.from_error(exc))
        except DomainError as exc:
            logger.warning("remote_login_failed", email=email, error=exc.message)
            return self._finish(ticket, Failure(ErrorKind.REMOTE, categorize_login_error(exc.message)))

        profile = await self._load_profile(account_id)
        logger.info("remote_login_success", account_id=account_id, has_profile=profile is not None)
        return self._finish(ticket, Success(), profile=profile)

    async def reset_password(self, email: str) -> OperationResult:
        ticket = self._begin()
        try:
            require_all_filled(email)
            await asyncio.to_thread(self._backend.send_password_reset_email, email)
        except DomainError as exc:
            return self._finish(ticket, Failure(exc.kind, exc.message or "Failed to send reset email"))
        return self._finish(ticket, Success(MSG_RESET_EMAIL_SENT))

    async def update_profile(self, *, name: str, department: str, student_number: str = "") -> OperationResult:
        account_id = self._backend.current_account_id()
        if account_id is None:
            return Failure(ErrorKind.AUTH, "No user logged in")

        ticket = self._begin(loading=False)
        updates = {"name": name, "department": department, "student_number": student_number}
        try:
            await asyncio.to_thread(self._backend.update_document, account_id, updates)
        except DomainError as exc:
            return self._finish(ticket, Failure(exc.kind, exc.message or "Failed to update profile"), track_state=False)

        profile = await self._load_profile(account_id)
        return self._finish(ticket, Success(MSG_PROFILE_UPDATED), profile=profile, track_state=False)

    async def refresh_profile(self) -> Optional[UserProfile]:
        """Reload the profile of an account that is already signed in."""
        account_id = self._backend.current_account_id()
        if account_id is None:
            return None
        ticket = self._begin(loading=False)
        profile = await self._load_profile(account_id)
        self._finish(ticket, Success(), profile=profile, track_state=False)
        return profile

    def logout(self) -> None:
        # Bumping the ticket turns every in-flight call into a stale one.
        with self._lock:
            self._seq += 1
            self._current_profile = None
            self._auth_state = None
        self._backend.sign_out()
        logger.info("remote_logout")
