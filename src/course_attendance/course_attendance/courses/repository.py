from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def get_by_id(self, course_id: str) -> Optional[Course]:
        raise NotImplementedError

    def add(self, course: Course) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError

    def list_for_instructor(self, instructor_id: str) -> Sequence[Course]:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[Course]:
        raise NotImplementedError
