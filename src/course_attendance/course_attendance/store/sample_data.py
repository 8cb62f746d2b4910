from __future__ import annotations

from ..core.enums import Role
from ..courses.model import Course
from ..courses.repository import CourseRepository
from ..users.model import User
from ..users.repository import UserRepository

SAMPLE_PASSWORD = "somePassword"

SAMPLE_USERS = (
    User("1", "Dr. Smith", "smith@university.edu", SAMPLE_PASSWORD, Role.INSTRUCTOR),
    User("2", "John Doe", "john@student.edu", SAMPLE_PASSWORD, Role.STUDENT),
    User("3", "Jane Wilson", "jane@student.edu", SAMPLE_PASSWORD, Role.STUDENT),
)

SAMPLE_COURSES = (
    Course("1", "Computer Science 101", "CS101", "Introduction to Programming", "MWF 10:00-11:00", "1", ("2", "3")),
    Course("2", "Data Structures", "CS201", "Advanced Data Structures", "TTh 2:00-3:30", "1", ("2",)),
)


def load_sample_data(users: UserRepository, courses: CourseRepository) -> bool:
    """Seed the demo instructor, students and courses into empty repositories."""
    if users.list_all():
        return False
    for user in SAMPLE_USERS:
        users.add(user)
    for course in SAMPLE_COURSES:
        courses.add(course)
    return True
