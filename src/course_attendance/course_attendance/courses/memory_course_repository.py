from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from .model import Course
from .repository import CourseRepository


class InMemoryCourseRepository(CourseRepository):
    def __init__(self, courses: Sequence[Course] = ()):
        self._courses: list[Course] = []
        for course in courses:
            self.add(course)

    def get_by_id(self, course_id: str) -> Optional[Course]:
        return next((c for c in self._courses if c.course_id == course_id), None)

    def add(self, course: Course) -> None:
        # Roster membership is a set; keep first-seen order.
        unique_ids = tuple(dict.fromkeys(course.student_ids))
        if unique_ids != course.student_ids:
            course = replace(course, student_ids=unique_ids)
        self._courses.append(course)

    def list_all(self) -> Sequence[Course]:
        return tuple(self._courses)

    def list_for_instructor(self, instructor_id: str) -> Sequence[Course]:
        return tuple(c for c in self._courses if c.instructor_id == instructor_id)

    def list_for_student(self, student_id: str) -> Sequence[Course]:
        return tuple(c for c in self._courses if student_id in c.student_ids)
