from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_CREDENTIALS_NAMESPACE
from .courses.memory_course_repository import InMemoryCourseRepository
from .courses.service import CourseService
from .credentials.json_file_store import JsonFileCredentialStore
from .credentials.memory_store import InMemoryCredentialStore
from .credentials.store import CredentialStore
from .database.bootstrap import apply_identity_schema
from .database.connection import DatabaseConnection, DBConfig
from .remote.auth_manager import RemoteAuthManager
from .remote.backend import IdentityBackend
from .remote.mysql_identity_backend import MySQLIdentityBackend
from .store.domain_store import DomainStore
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    courses_repo: InMemoryCourseRepository
    attendance_repo: InMemoryAttendanceRepository
    credentials: CredentialStore

    auth_service: AuthService
    user_service: UserService
    course_service: CourseService
    attendance_service: AttendanceService

    store: DomainStore
    remote_auth: Optional[RemoteAuthManager] = None


def build_credential_store(settings: Mapping[str, Any]) -> CredentialStore:
    path = settings.get("CREDENTIALS_PATH")
    if not path:
        return InMemoryCredentialStore()
    return JsonFileCredentialStore(path, namespace=settings.get("CREDENTIALS_NAMESPACE") or DEFAULT_CREDENTIALS_NAMESPACE)


def build_identity_backend(settings: Mapping[str, Any]) -> Optional[IdentityBackend]:
    kind = str(settings.get("IDENTITY_BACKEND") or "none").lower()
    if kind == "none":
        return None
    if kind != "mysql":
        raise ValueError(f"Unsupported IDENTITY_BACKEND: {kind!r}")

    conn = DatabaseConnection(DBConfig.from_mapping(settings.get("DB_CONFIG") or {}))
    if settings.get("AUTO_INIT_DB"):
        apply_identity_schema(conn)
    return MySQLIdentityBackend(conn)


def build_container(
    *,
    settings: Mapping[str, Any],
    clock: Callable[[], datetime] = now_local,
    credentials: Optional[CredentialStore] = None,
    identity_backend: Optional[IdentityBackend] = None,
) -> Container:
    users_repo = InMemoryUserRepository()
    courses_repo = InMemoryCourseRepository()
    attendance_repo = InMemoryAttendanceRepository()
    if credentials is None:
        credentials = build_credential_store(settings)

    auth_service = AuthService(users_repo, require_password_match=bool(settings.get("REQUIRE_PASSWORD_MATCH", False)))
    user_service = UserService(users_repo)
    course_service = CourseService(courses_repo, users_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        courses_repo,
        clock=clock,
        enforce_enrollment=bool(settings.get("ENFORCE_ENROLLMENT", False)),
    )

    store = DomainStore(
        users=users_repo,
        courses=courses_repo,
        attendance=attendance_repo,
        auth_service=auth_service,
        user_service=user_service,
        course_service=course_service,
        attendance_service=attendance_service,
        credentials=credentials,
        report_authorization_errors=bool(settings.get("REPORT_AUTHORIZATION_ERRORS", False)),
    )

    backend = identity_backend or build_identity_backend(settings)
    remote_auth = RemoteAuthManager(backend) if backend is not None else None

    return Container(
        users_repo=users_repo,
        courses_repo=courses_repo,
        attendance_repo=attendance_repo,
        credentials=credentials,
        auth_service=auth_service,
        user_service=user_service,
        course_service=course_service,
        attendance_service=attendance_service,
        store=store,
        remote_auth=remote_auth,
    )
