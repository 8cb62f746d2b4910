from __future__ import annotations

import uuid
from typing import Sequence

import structlog

from ..common.validators import require_all_filled
from ..core.constants import MSG_EMAIL_EXISTS, MSG_INVALID_CREDENTIALS
from ..core.enums import Role, parse_role
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .model import User
from .repository import UserRepository

logger = structlog.get_logger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository, *, require_password_match: bool = False):
        self._users = users
        self._require_password_match = bool(require_password_match)

    def authenticate(self, email: str, password: str) -> User:
        require_all_filled(email, password)

        user = self._users.get_by_email(email)
        if user is None:
            logger.warning("login_user_not_found", email=email)
            raise AuthenticationError(MSG_INVALID_CREDENTIALS)

        # Only the email is checked unless the deployment opts into password checks.
        if self._require_password_match and user.password != password:
            logger.warning("login_invalid_password", email=email)
            raise AuthenticationError(MSG_INVALID_CREDENTIALS)

        return user


class UserService:
    """Use case: register accounts and list people."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register_account(self, *, name: str, email: str, password: str, role: Role | str) -> User:
        require_all_filled(name, email, password)
        try:
            parsed_role = parse_role(role)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        if self._users.get_by_email(email) is not None:
            logger.warning("register_duplicate_email", email=email)
            raise ConflictError(MSG_EMAIL_EXISTS)

        user = User(
            user_id=str(uuid.uuid4()),
            name=name,
            email=email,
            password=password,
            role=parsed_role,
        )
        self._users.add(user)
        logger.info("register_success", user_id=user.user_id, role=user.role.value)
        return user

    def list_students(self) -> Sequence[User]:
        return self._users.list_by_role(Role.STUDENT)
