from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role fixed on a user at registration."""

    STUDENT = "Student"
    INSTRUCTOR = "Instructor"


class ErrorKind(str, Enum):
    """Machine-readable category carried next to every error message."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    AUTH = "auth"
    AUTHORIZATION = "authorization"
    REMOTE = "remote"


class AttendanceStanding(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    LOW = "low"


def parse_role(value: str | Role) -> Role:
    """Accept 'Student', 'student', 'STUDENT' (or a Role) and return the Role."""
    if isinstance(value, Role):
        return value
    for role in Role:
        if role.value.lower() == str(value).strip().lower():
            return role
    raise ValueError(f"Unknown role: {value!r}")
