from __future__ import annotations

import threading
from typing import Callable, Optional, Sequence

import structlog

from ..attendance.model import AttendanceRecord, AttendanceSummary, CourseDaySummary
from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService
from ..core.constants import (
    MSG_COURSE_ADDED,
    MSG_LOGGED_IN,
    MSG_MARKED_ABSENT,
    MSG_MARKED_PRESENT,
    MSG_REGISTERED,
)
from ..core.enums import ErrorKind, Role
from ..core.exceptions import AuthorizationError, DomainError
from ..core.results import Failure, OperationResult, Success
from ..courses.repository import CourseRepository
from ..courses.service import CourseService
from ..credentials.model import SavedCredentials
from ..credentials.store import CredentialStore
from ..users.model import User
from ..users.repository import UserRepository
from ..users.service import AuthService, UserService
from .sample_data import load_sample_data
from .snapshot import StoreSnapshot

logger = structlog.get_logger(__name__)

Observer = Callable[[StoreSnapshot], None]


class DomainStore:
    """Owns users, courses, attendance records and the single session.

    Every operation validates, mutates all-or-nothing, recomputes the
    role-filtered view and publishes a fresh snapshot to observers.
    Errors are captured into ``error``/``error_kind`` and returned as a
    ``Failure``; nothing raises past this class.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        courses: CourseRepository,
        attendance: AttendanceRepository,
        auth_service: AuthService,
        user_service: UserService,
        course_service: CourseService,
        attendance_service: AttendanceService,
        credentials: Optional[CredentialStore] = None,
        report_authorization_errors: bool = False,
    ):
        self._users = users
        self._courses = courses
        self._attendance = attendance
        self._auth = auth_service
        self._user_service = user_service
        self._course_service = course_service
        self._attendance_service = attendance_service
        self._credentials = credentials
        self._report_authorization_errors = bool(report_authorization_errors)

        self._lock = threading.RLock()
        self._observers: list[Observer] = []

        self._session: Optional[User] = None
        self._error: Optional[str] = None
        self._error_kind: Optional[ErrorKind] = None
        self._success: Optional[str] = None
        self._view = StoreSnapshot()
        self._refresh_view()

    # -- observation -------------------------------------------------

    @property
    def current_user(self) -> Optional[User]:
        return self._session

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return self._view

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a function that unregisters it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _refresh_view(self) -> None:
        self._view = StoreSnapshot(
            current_user=self._session,
            courses=tuple(self._course_service.visible_courses(self._session)),
            attendance_records=tuple(self._attendance.list_all()),
            students=tuple(self._user_service.list_students()),
            error=self._error,
            error_kind=self._error_kind,
            success=self._success,
        )

    def _publish(self) -> None:
        self._refresh_view()
        snapshot = self._view
        for observer in list(self._observers):
            observer(snapshot)

    def _fail(self, exc: DomainError) -> Failure:
        self._error = exc.message
        self._error_kind = exc.kind
        self._publish()
        return Failure.from_error(exc)

    def _succeed(self, message: Optional[str]) -> Success:
        self._error = None
        self._error_kind = None
        self._success = message
        self._publish()
        return Success(message)

    def _denied(self, exc: AuthorizationError, operation: str) -> Failure:
        user_id = self._session.user_id if self._session else None
        logger.info("operation_denied", operation=operation, user_id=user_id)
        if self._report_authorization_errors:
            return self._fail(exc)
        return Failure.from_error(exc)

    # -- authentication ----------------------------------------------

    def register(self, name: str, email: str, password: str, role: Role | str) -> OperationResult:
        with self._lock:
            try:
                self._user_service.register_account(name=name, email=email, password=password, role=role)
            except DomainError as exc:
                return self._fail(exc)
            # Registration never opens a session; the caller logs in afterwards.
            return self._succeed(MSG_REGISTERED)

    def login(self, email: str, password: str, remember_me: bool = False) -> OperationResult:
        with self._lock:
            return self._login(email, password, remember_me=remember_me)

    def _login(
        self,
        email: str,
        password: str,
        *,
        remember_me: bool,
        persist_credentials: bool = True,
        announce: bool = True,
    ) -> OperationResult:
        try:
            user = self._auth.authenticate(email, password)
        except DomainError as exc:
            if not announce:
                return Failure.from_error(exc)
            return self._fail(exc)

        if persist_credentials:
            if remember_me:
                self._save_credentials(email, password)
            else:
                self._clear_credentials()

        self._session = user
        logger.info("login_success", user_id=user.user_id, role=user.role.value)
        return self._succeed(MSG_LOGGED_IN if announce else None)

    def logout(self) -> OperationResult:
        with self._lock:
            user_id = self._session.user_id if self._session else None
            self._session = None
            self._clear_credentials()
            logger.info("logout", user_id=user_id)
            self._publish()
            return Success()

    def restore_session(self) -> Optional[OperationResult]:
        """Log in with remembered credentials, if any.

        Returns None when nothing was attempted. A failed attempt wipes the
        saved credentials and does not surface an error message.
        """
        with self._lock:
            saved = self.saved_credentials()
            if not saved.can_auto_login:
                logger.debug("auto_login_skipped", remember_me=saved.remember_me)
                return None

            result = self._login(
                saved.email,
                saved.password,
                remember_me=False,
                persist_credentials=False,
                announce=False,
            )
            if isinstance(result, Failure):
                logger.warning("auto_login_failed", email=saved.email, kind=result.kind.value)
                self._clear_credentials()
            return result

    def saved_credentials(self) -> SavedCredentials:
        if self._credentials is None:
            return SavedCredentials()
        return self._credentials.load()

    def _save_credentials(self, email: str, password: str) -> None:
        if self._credentials is None:
            return
        try:
            self._credentials.save(email, password)
        except OSError:
            logger.exception("credentials_save_failed", email=email)

    def _clear_credentials(self) -> None:
        if self._credentials is None:
            return
        try:
            self._credentials.clear()
        except OSError:
            logger.exception("credentials_clear_failed")

    # -- courses and attendance --------------------------------------

    def add_course(self, name: str, code: str, description: str, schedule: str) -> OperationResult:
        with self._lock:
            try:
                self._course_service.add_course(
                    current_user=self._session,
                    name=name,
                    code=code,
                    description=description,
                    schedule=schedule,
                )
            except AuthorizationError as exc:
                return self._denied(exc, "add_course")
            except DomainError as exc:
                return self._fail(exc)
            return self._succeed(MSG_COURSE_ADDED)

    def mark_attendance(self, course_id: str, is_present: bool) -> OperationResult:
        with self._lock:
            try:
                self._attendance_service.mark(
                    current_user=self._session,
                    course_id=course_id,
                    is_present=is_present,
                )
            except AuthorizationError as exc:
                return self._denied(exc, "mark_attendance")
            except DomainError as exc:
                return self._fail(exc)
            return self._succeed(MSG_MARKED_PRESENT if is_present else MSG_MARKED_ABSENT)

    def get_today_attendance(self, course_id: str, student_id: str) -> Optional[AttendanceRecord]:
        with self._lock:
            return self._attendance_service.today_record(course_id, student_id)

    def course_roster(self, course_id: str) -> Sequence[User]:
        with self._lock:
            return tuple(self._course_service.roster(course_id))

    def student_summary(self, course_id: str, student_id: str) -> AttendanceSummary:
        with self._lock:
            return self._attendance_service.student_summary(course_id, student_id)

    def course_day_summary(self, course_id: str) -> CourseDaySummary:
        with self._lock:
            return self._attendance_service.course_day_summary(course_id)

    # -- messages and data -------------------------------------------

    def clear_messages(self) -> None:
        with self._lock:
            self._error = None
            self._error_kind = None
            self._success = None
            self._publish()

    def seed_sample_data(self) -> bool:
        with self._lock:
            seeded = load_sample_data(self._users, self._courses)
            if seeded:
                logger.info("sample_data_loaded", users=len(self._users.list_all()))
                self._publish()
            return seeded
