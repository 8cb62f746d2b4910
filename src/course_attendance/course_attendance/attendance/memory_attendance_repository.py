from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


def _same_slot(a: AttendanceRecord, course_id: str, student_id: str, day: date) -> bool:
    return a.course_id == course_id and a.student_id == student_id and a.date == day


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._records: list[AttendanceRecord] = []

    def get_for_day(self, course_id: str, student_id: str, day: date) -> Optional[AttendanceRecord]:
        return next((r for r in self._records if _same_slot(r, course_id, student_id, day)), None)

    def replace_for_day(self, record: AttendanceRecord) -> None:
        kept = [r for r in self._records if not _same_slot(r, record.course_id, record.student_id, record.date)]
        kept.append(record)
        self._records = kept

    def list_all(self) -> Sequence[AttendanceRecord]:
        return tuple(self._records)

    def list_for_course(self, course_id: str, *, day: Optional[date] = None) -> Sequence[AttendanceRecord]:
        return tuple(
            r for r in self._records if r.course_id == course_id and (day is None or r.date == day)
        )

    def list_for_student(self, course_id: str, student_id: str) -> Sequence[AttendanceRecord]:
        return tuple(r for r in self._records if r.course_id == course_id and r.student_id == student_id)
