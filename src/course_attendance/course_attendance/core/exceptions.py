from __future__ import annotations

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.VALIDATION

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainError):
    """Raised when a required field is missing or malformed."""

    kind = ErrorKind.VALIDATION


class ConflictError(DomainError):
    """Raised when a unique value (e.g. email) is already taken."""

    kind = ErrorKind.CONFLICT


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    kind = ErrorKind.AUTH


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    kind = ErrorKind.AUTHORIZATION


class RemoteError(DomainError):
    """Raised when the remote identity service fails."""

    kind = ErrorKind.REMOTE
