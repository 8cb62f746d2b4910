"""Example: drive the Domain Store directly (no Flask).

Controllers are a thin layer; the rules live in services and the store.
"""

from src.course_attendance.course_attendance.container import build_container
from src.course_attendance.course_attendance.core.enums import Role


def main():
    container = build_container(settings={"IDENTITY_BACKEND": "none"})
    store = container.store
    store.subscribe(lambda snap: print("success:", snap.success, "error:", snap.error))

    store.register("Dr. A", "a@u.edu", "pw1", Role.INSTRUCTOR)
    store.login("a@u.edu", "pw1")
    store.add_course("Algorithms", "CS301", "", "MWF 9-10")
    course = store.snapshot().courses[0]
    store.logout()

    store.register("B", "b@u.edu", "pw2", Role.STUDENT)
    store.login("b@u.edu", "pw2")
    store.mark_attendance(course.course_id, True)
    store.mark_attendance(course.course_id, False)

    student = store.current_user
    print(store.get_today_attendance(course.course_id, student.user_id))
    print(store.student_summary(course.course_id, student.user_id))


if __name__ == "__main__":
    main()
