from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Course:
    """Domain entity: a course owned by one instructor."""

    course_id: str
    name: str
    code: str
    description: str
    schedule: str
    instructor_id: str
    student_ids: tuple[str, ...] = field(default_factory=tuple)

    def is_enrolled(self, user_id: str) -> bool:
        return user_id in self.student_ids
