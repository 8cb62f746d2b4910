from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, login_required, state_response
from ..core.enums import ErrorKind
from ..container import Container
from ..store.serializers import record_to_dict, summary_to_dict


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/courses/<course_id>/attendance", methods=["POST"], endpoint="attendance_mark")
    @login_required(store)
    def attendance_mark(course_id: str):
        data = request.get_json(silent=True) or {}
        is_present = data.get("is_present")
        if not isinstance(is_present, bool):
            return error_response(ErrorKind.VALIDATION, "is_present must be true or false")

        result = store.mark_attendance(course_id, is_present)
        return state_response(store, result)

    @app.route(
        "/api/courses/<course_id>/attendance/<student_id>/today",
        methods=["GET"],
        endpoint="attendance_student_today",
    )
    @login_required(store)
    def attendance_student_today(course_id: str, student_id: str):
        record = store.get_today_attendance(course_id, student_id)
        return jsonify({"record": record_to_dict(record)})

    @app.route(
        "/api/courses/<course_id>/attendance/<student_id>/summary",
        methods=["GET"],
        endpoint="attendance_student_summary",
    )
    @login_required(store)
    def attendance_student_summary(course_id: str, student_id: str):
        return jsonify(summary_to_dict(store.student_summary(course_id, student_id)))
