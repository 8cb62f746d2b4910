from __future__ import annotations

from datetime import date

import pytest

from src.course_attendance.course_attendance.core.enums import ErrorKind, Role
from src.course_attendance.course_attendance.core.results import Failure, Success


def _login_as(store, name, email, password, role):
    store.register(name, email, password, role)
    store.login(email, password)
    return store.current_user


def test_register_then_duplicate_email_is_a_conflict(store, container):
    first = store.register("A", "a@u.edu", "pw", Role.STUDENT)
    second = store.register("A again", "a@u.edu", "pw2", Role.INSTRUCTOR)

    assert isinstance(first, Success)
    assert second == Failure(ErrorKind.CONFLICT, "Email already exists")
    assert len(container.users_repo.list_all()) == 1
    snap = store.snapshot()
    assert snap.error == "Email already exists"
    assert snap.error_kind == ErrorKind.CONFLICT


def test_register_with_missing_field_changes_nothing(store, container):
    result = store.register("", "a@u.edu", "pw", Role.STUDENT)

    assert result == Failure(ErrorKind.VALIDATION, "Please fill in all fields")
    assert container.users_repo.list_all() == ()


def test_registration_does_not_authenticate(store):
    result = store.register("A", "a@u.edu", "pw", Role.INSTRUCTOR)

    assert result == Success("Registration successful! Please login with your credentials.")
    assert store.current_user is None
    assert store.snapshot().current_user is None
    assert store.snapshot().courses == ()


def test_login_unknown_email(store):
    result = store.login("ghost@u.edu", "pw")

    assert result == Failure(ErrorKind.AUTH, "Invalid credentials")
    assert store.current_user is None
    assert store.snapshot().error == "Invalid credentials"


def test_login_does_not_verify_password_by_default(store):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)

    assert isinstance(store.login("a@u.edu", "not-the-password"), Success)
    assert store.current_user.email == "a@u.edu"


def test_login_verifies_password_when_configured(make_container):
    store = make_container(REQUIRE_PASSWORD_MATCH=True).store
    store.register("A", "a@u.edu", "pw", Role.STUDENT)

    assert store.login("a@u.edu", "wrong") == Failure(ErrorKind.AUTH, "Invalid credentials")
    assert store.current_user is None
    assert isinstance(store.login("a@u.edu", "pw"), Success)


def test_login_clears_previous_error(store):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)
    store.login("ghost@u.edu", "pw")
    store.login("a@u.edu", "pw")

    snap = store.snapshot()
    assert snap.error is None
    assert snap.error_kind is None
    assert snap.success == "Login successful"


def test_instructor_sees_only_own_courses(store, container):
    other = _login_as(store, "Dr. B", "b@u.edu", "pw", Role.INSTRUCTOR)
    store.add_course("Other", "OT100", "", "TTh")
    store.logout()

    me = _login_as(store, "Dr. A", "a@u.edu", "pw", Role.INSTRUCTOR)
    store.add_course("Mine", "MY100", "", "MWF")

    courses = store.snapshot().courses
    assert [c.name for c in courses] == ["Mine"]
    assert all(c.instructor_id == me.user_id for c in courses)
    assert other.user_id != me.user_id
    assert len(container.courses_repo.list_all()) == 2


def test_student_sees_only_enrolled_courses(store):
    store.seed_sample_data()
    store.login("jane@student.edu", "somePassword")

    assert [c.code for c in store.snapshot().courses] == ["CS101"]

    store.logout()
    store.login("john@student.edu", "somePassword")
    assert [c.code for c in store.snapshot().courses] == ["CS101", "CS201"]


def test_logout_empties_derived_courses(store):
    store.seed_sample_data()
    store.login("smith@university.edu", "somePassword")
    assert len(store.snapshot().courses) == 2

    store.logout()

    snap = store.snapshot()
    assert snap.current_user is None
    assert snap.courses == ()


def test_students_view_lists_every_student(store):
    store.seed_sample_data()
    store.register("New", "new@u.edu", "pw", Role.STUDENT)
    store.register("Prof", "prof@u.edu", "pw", Role.INSTRUCTOR)

    assert [u.name for u in store.snapshot().students] == ["John Doe", "Jane Wilson", "New"]


def test_student_cannot_add_course(store, container):
    _login_as(store, "S", "s@u.edu", "pw", Role.STUDENT)
    store.clear_messages()

    result = store.add_course("Hack", "HK1", "", "")

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.AUTHORIZATION
    assert container.courses_repo.list_all() == ()
    snap = store.snapshot()
    assert snap.success is None
    assert snap.error is None


def test_instructor_cannot_mark_attendance(store, container):
    store.seed_sample_data()
    store.login("smith@university.edu", "somePassword")
    store.clear_messages()

    result = store.mark_attendance("1", True)

    assert isinstance(result, Failure)
    assert container.attendance_repo.list_all() == ()
    assert store.snapshot().success is None


def test_anonymous_cannot_add_course(store, container):
    assert isinstance(store.add_course("X", "X1", "", ""), Failure)
    assert container.courses_repo.list_all() == ()


def test_authorization_errors_reported_when_configured(make_container):
    store = make_container(REPORT_AUTHORIZATION_ERRORS=True).store
    _login_as(store, "S", "s@u.edu", "pw", Role.STUDENT)

    store.add_course("Hack", "HK1", "", "")

    snap = store.snapshot()
    assert snap.error_kind == ErrorKind.AUTHORIZATION
    assert snap.error


def test_mark_attendance_keeps_one_record_per_day(store, clock):
    store.seed_sample_data()
    store.login("john@student.edu", "somePassword")

    store.mark_attendance("1", True)
    assert store.snapshot().success == "Marked as Present"
    store.mark_attendance("1", False)
    assert store.snapshot().success == "Marked as Absent"
    store.mark_attendance("2", True)

    records = store.snapshot().attendance_records
    today = [r for r in records if r.course_id == "1" and r.student_id == "2" and r.date == clock.now.date()]
    assert len(today) == 1
    assert today[0].is_present is False
    assert len(records) == 2


def test_end_to_end_instructor_then_student(store, clock):
    store.register("Dr. A", "a@u.edu", "pw1", Role.INSTRUCTOR)
    store.login("a@u.edu", "pw1")
    dr_a = store.current_user
    assert store.add_course("Algorithms", "CS301", "", "MWF 9-10") == Success("Course added successfully")

    courses = store.snapshot().courses
    assert len(courses) == 1
    assert courses[0].instructor_id == dr_a.user_id
    course_id = courses[0].course_id

    store.logout()
    store.register("B", "b@u.edu", "pw2", Role.STUDENT)
    store.login("b@u.edu", "pw2")
    b = store.current_user
    store.mark_attendance(course_id, True)
    store.mark_attendance(course_id, False)

    matching = [
        r
        for r in store.snapshot().attendance_records
        if (r.course_id, r.student_id, r.date) == (course_id, b.user_id, date(2026, 2, 2))
    ]
    assert len(matching) == 1
    assert matching[0].is_present is False
    assert store.get_today_attendance(course_id, b.user_id) == matching[0]


def test_get_today_attendance_is_pure(store):
    seen = []
    store.subscribe(seen.append)

    assert store.get_today_attendance("1", "2") is None
    assert seen == []


def test_messages_persist_until_cleared(store):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)
    store.register("A", "a@u.edu", "pw", Role.STUDENT)

    snap = store.snapshot()
    assert snap.success == "Registration successful! Please login with your credentials."
    assert snap.error == "Email already exists"

    store.clear_messages()
    snap = store.snapshot()
    assert (snap.success, snap.error, snap.error_kind) == (None, None, None)


def test_observers_receive_snapshot_after_each_change(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.register("A", "a@u.edu", "pw", Role.STUDENT)
    store.login("a@u.edu", "pw")
    assert [s.current_user is not None for s in seen] == [False, True]
    assert seen[-1] == store.snapshot()

    unsubscribe()
    store.logout()
    assert len(seen) == 2


def test_seed_sample_data_only_once(store, container):
    assert store.seed_sample_data() is True
    assert store.seed_sample_data() is False
    assert len(container.users_repo.list_all()) == 3
    assert len(container.courses_repo.list_all()) == 2


def test_roster_and_summaries(store):
    store.seed_sample_data()
    store.login("jane@student.edu", "somePassword")
    store.mark_attendance("1", True)

    assert [u.name for u in store.course_roster("1")] == ["John Doe", "Jane Wilson"]
    day = store.course_day_summary("1")
    assert (day.present, day.total) == (1, 1)
    summary = store.student_summary("1", "3")
    assert (summary.present, summary.percentage) == (1, 100)


@pytest.mark.parametrize("role", ["janitor", None])
def test_register_with_unknown_role_is_a_validation_failure(store, container, role):
    result = store.register("A", "a@u.edu", "pw", role)

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.VALIDATION
    assert container.users_repo.list_all() == ()
    assert store.snapshot().error_kind == ErrorKind.VALIDATION


def test_register_accepts_lowercase_role_name(store):
    assert isinstance(store.register("A", "a@u.edu", "pw", "student"), Success)
    assert [u.email for u in store.snapshot().students] == ["a@u.edu"]
