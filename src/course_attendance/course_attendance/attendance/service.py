from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Callable, Optional

import structlog

from ..common.datetime_utils import now_local
from ..core.constants import GOOD_STANDING_PERCENT, MSG_NOT_ALLOWED, WARNING_STANDING_PERCENT
from ..core.enums import AttendanceStanding
from ..core.exceptions import AuthorizationError
from ..courses.repository import CourseRepository
from ..users.model import User
from .model import AttendanceRecord, AttendanceSummary, CourseDaySummary
from .repository import AttendanceRepository

logger = structlog.get_logger(__name__)


def standing_for(percentage: int) -> AttendanceStanding:
    if percentage >= GOOD_STANDING_PERCENT:
        return AttendanceStanding.GOOD
    if percentage >= WARNING_STANDING_PERCENT:
        return AttendanceStanding.WARNING
    return AttendanceStanding.LOW


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        courses: CourseRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        enforce_enrollment: bool = False,
    ):
        self._attendance = attendance
        self._courses = courses
        self._clock = clock
        self._enforce_enrollment = bool(enforce_enrollment)

    def today(self) -> date:
        return self._clock().date()

    def mark(self, *, current_user: Optional[User], course_id: str, is_present: bool) -> AttendanceRecord:
        if current_user is None or not current_user.is_student:
            raise AuthorizationError(MSG_NOT_ALLOWED)

        if self._enforce_enrollment:
            course = self._courses.get_by_id(course_id)
            if course is None or not course.is_enrolled(current_user.user_id):
                logger.warning("attendance_not_enrolled", course_id=course_id, student_id=current_user.user_id)
                raise AuthorizationError(MSG_NOT_ALLOWED)

        now = self._clock()
        record = AttendanceRecord(
            record_id=str(uuid.uuid4()),
            course_id=course_id,
            student_id=current_user.user_id,
            date=now.date(),
            is_present=bool(is_present),
            created_at=now,
        )
        self._attendance.replace_for_day(record)
        logger.info(
            "attendance_marked",
            course_id=course_id,
            student_id=current_user.user_id,
            date=record.date.isoformat(),
            is_present=record.is_present,
        )
        return record

    def today_record(self, course_id: str, student_id: str) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_day(course_id, student_id, self.today())

    def student_summary(self, course_id: str, student_id: str) -> AttendanceSummary:
        records = self._attendance.list_for_student(course_id, student_id)
        total = len(records)
        present = sum(1 for r in records if r.is_present)
        percentage = (present * 100) // total if total else 0
        return AttendanceSummary(
            course_id=course_id,
            student_id=student_id,
            present=present,
            absent=total - present,
            total=total,
            percentage=percentage,
            standing=standing_for(percentage),
        )

    def course_day_summary(self, course_id: str) -> CourseDaySummary:
        today = self.today()
        records = self._attendance.list_for_course(course_id, day=today)
        return CourseDaySummary(
            course_id=course_id,
            date=today,
            present=sum(1 for r in records if r.is_present),
            total=len(records),
        )
