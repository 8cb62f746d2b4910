from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import ErrorKind
from ..courses.model import Course
from ..users.model import User


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only state handed to observers after each change."""

    current_user: Optional[User] = None
    courses: tuple[Course, ...] = ()
    attendance_records: tuple[AttendanceRecord, ...] = ()
    students: tuple[User, ...] = ()
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    success: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None
