"""Plain-dict views of domain objects for JSON responses (passwords are never included)."""
from __future__ import annotations

from typing import Any, Optional

from ..attendance.model import AttendanceRecord, AttendanceSummary, CourseDaySummary
from ..common.datetime_utils import format_iso_date
from ..core.results import Failure, Loading, OperationResult, Success
from ..courses.model import Course
from ..remote.model import UserProfile
from ..users.model import User
from .snapshot import StoreSnapshot


def user_to_dict(user: Optional[User]) -> Optional[dict[str, Any]]:
    if user is None:
        return None
    return {"id": user.user_id, "name": user.name, "email": user.email, "role": user.role.value}


def course_to_dict(course: Course) -> dict[str, Any]:
    return {
        "id": course.course_id,
        "name": course.name,
        "code": course.code,
        "description": course.description,
        "schedule": course.schedule,
        "instructor_id": course.instructor_id,
        "student_ids": list(course.student_ids),
    }


def record_to_dict(record: Optional[AttendanceRecord]) -> Optional[dict[str, Any]]:
    if record is None:
        return None
    return {
        "id": record.record_id,
        "course_id": record.course_id,
        "student_id": record.student_id,
        "date": format_iso_date(record.date),
        "is_present": record.is_present,
        "created_at": record.created_at.isoformat(),
    }


def summary_to_dict(summary: AttendanceSummary) -> dict[str, Any]:
    return {
        "course_id": summary.course_id,
        "student_id": summary.student_id,
        "present": summary.present,
        "absent": summary.absent,
        "total": summary.total,
        "percentage": summary.percentage,
        "standing": summary.standing.value,
    }


def day_summary_to_dict(summary: CourseDaySummary) -> dict[str, Any]:
    return {
        "course_id": summary.course_id,
        "date": format_iso_date(summary.date),
        "present": summary.present,
        "total": summary.total,
    }


def profile_to_dict(profile: Optional[UserProfile]) -> Optional[dict[str, Any]]:
    if profile is None:
        return None
    return {"account_id": profile.account_id, **profile.to_document()}


def result_to_dict(result: Optional[OperationResult | Loading]) -> Optional[dict[str, Any]]:
    if result is None:
        return None
    if isinstance(result, Success):
        return {"status": "success", "message": result.message}
    if isinstance(result, Failure):
        return {"status": "error", "kind": result.kind.value, "message": result.message}
    if isinstance(result, Loading):
        return {"status": "loading"}
    raise TypeError(f"Unsupported result: {result!r}")


def snapshot_to_dict(snapshot: StoreSnapshot) -> dict[str, Any]:
    return {
        "is_authenticated": snapshot.is_authenticated,
        "current_user": user_to_dict(snapshot.current_user),
        "courses": [course_to_dict(c) for c in snapshot.courses],
        "attendance_records": [record_to_dict(r) for r in snapshot.attendance_records],
        "students": [user_to_dict(u) for u in snapshot.students],
        "error": snapshot.error,
        "error_kind": snapshot.error_kind.value if snapshot.error_kind else None,
        "success": snapshot.success,
    }
