from __future__ import annotations

import uuid
from typing import Optional, Sequence

import structlog

from ..core.constants import MSG_NOT_ALLOWED
from ..core.exceptions import AuthorizationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Course
from .repository import CourseRepository

logger = structlog.get_logger(__name__)


class CourseService:
    def __init__(self, courses: CourseRepository, users: UserRepository):
        self._courses = courses
        self._users = users

    def add_course(
        self,
        *,
        current_user: Optional[User],
        name: str,
        code: str,
        description: str,
        schedule: str,
    ) -> Course:
        if current_user is None or not current_user.is_instructor:
            raise AuthorizationError(MSG_NOT_ALLOWED)

        course = Course(
            course_id=str(uuid.uuid4()),
            name=name,
            code=code,
            description=description,
            schedule=schedule,
            instructor_id=current_user.user_id,
        )
        self._courses.add(course)
        logger.info("course_added", course_id=course.course_id, instructor_id=current_user.user_id)
        return course

    def visible_courses(self, user: Optional[User]) -> Sequence[Course]:
        """Courses the given user should see: taught ones or enrolled ones."""
        if user is None:
            return ()
        if user.is_instructor:
            return self._courses.list_for_instructor(user.user_id)
        return self._courses.list_for_student(user.user_id)

    def roster(self, course_id: str) -> Sequence[User]:
        course = self._courses.get_by_id(course_id)
        if course is None:
            return ()
        out: list[User] = []
        for student_id in course.student_ids:
            user = self._users.get_by_id(student_id)
            if user is not None and user.is_student:
                out.append(user)
        return out
