from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceStanding


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's presence for one course on one day."""

    record_id: str
    course_id: str
    student_id: str
    date: date
    is_present: bool
    created_at: datetime


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: a student's totals for one course."""

    course_id: str
    student_id: str
    present: int
    absent: int
    total: int
    percentage: int
    standing: AttendanceStanding


@dataclass(frozen=True)
class CourseDaySummary:
    """Read-model: how many of today's records in a course are present."""

    course_id: str
    date: date
    present: int
    total: int
