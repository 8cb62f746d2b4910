from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import login_required, state_response
from ..container import Container
from ..store.serializers import day_summary_to_dict, user_to_dict


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/courses", methods=["POST"], endpoint="courses_add")
    @login_required(store)
    def courses_add():
        data = request.get_json(silent=True) or {}
        result = store.add_course(
            str(data.get("name") or ""),
            str(data.get("code") or ""),
            str(data.get("description") or ""),
            str(data.get("schedule") or ""),
        )
        return state_response(store, result)

    @app.route("/api/courses/<course_id>/roster", methods=["GET"], endpoint="courses_roster")
    @login_required(store)
    def courses_roster(course_id: str):
        students = store.course_roster(course_id)
        return jsonify({"course_id": course_id, "students": [user_to_dict(u) for u in students]})

    @app.route("/api/courses/<course_id>/attendance/today", methods=["GET"], endpoint="courses_attendance_today")
    @login_required(store)
    def courses_attendance_today(course_id: str):
        return jsonify(day_summary_to_dict(store.course_day_summary(course_id)))
