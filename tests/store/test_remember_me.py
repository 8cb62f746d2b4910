from __future__ import annotations

from src.course_attendance.course_attendance.core.enums import ErrorKind, Role
from src.course_attendance.course_attendance.core.results import Failure, Success
from src.course_attendance.course_attendance.credentials.model import SavedCredentials


def test_login_with_remember_me_saves_credentials(store, credentials):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)
    store.login("a@u.edu", "pw", remember_me=True)

    assert credentials.load() == SavedCredentials("a@u.edu", "pw", True)
    assert store.saved_credentials() == SavedCredentials("a@u.edu", "pw", True)


def test_login_without_remember_me_clears_credentials(store, credentials):
    credentials.save("old@u.edu", "old")
    store.register("A", "a@u.edu", "pw", Role.STUDENT)

    store.login("a@u.edu", "pw")

    assert credentials.load() == SavedCredentials("", "", False)


def test_failed_login_leaves_credentials_alone(store, credentials):
    credentials.save("old@u.edu", "old")

    store.login("ghost@u.edu", "pw", remember_me=True)

    assert credentials.load().email == "old@u.edu"


def test_logout_always_clears_credentials(store, credentials):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)
    store.login("a@u.edu", "pw", remember_me=True)

    store.logout()

    assert credentials.load().can_auto_login is False
    assert store.current_user is None


def test_restore_session_logs_in_quietly(store, credentials):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)
    store.clear_messages()
    credentials.save("a@u.edu", "pw")

    result = store.restore_session()

    assert result == Success(None)
    assert store.current_user.email == "a@u.edu"
    assert store.snapshot().success is None
    assert credentials.load() == SavedCredentials("a@u.edu", "pw", True)


def test_restore_session_skipped_without_remember_me(store):
    store.register("A", "a@u.edu", "pw", Role.STUDENT)

    assert store.restore_session() is None
    assert store.current_user is None


def test_failed_restore_clears_credentials_without_error(store, credentials):
    store.clear_messages()
    credentials.save("ghost@u.edu", "pw")

    result = store.restore_session()

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.AUTH
    assert store.snapshot().error is None
    assert credentials.load() == SavedCredentials("", "", False)
