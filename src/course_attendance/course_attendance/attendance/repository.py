from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_day(self, course_id: str, student_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def replace_for_day(self, record: AttendanceRecord) -> None:
        """Store record, dropping any earlier one for the same course, student and day."""
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_course(self, course_id: str, *, day: Optional[date] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, course_id: str, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
