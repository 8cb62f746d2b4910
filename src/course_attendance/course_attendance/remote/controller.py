from __future__ import annotations

import asyncio

from flask import Flask, jsonify, request

from ..common.http import error_response, status_for
from ..container import Container
from ..core.enums import ErrorKind
from ..core.results import OperationResult
from ..store.serializers import profile_to_dict, result_to_dict


def register(app: Flask, container: Container) -> None:
    manager = container.remote_auth
    if manager is None:
        return

    def account_response(result: OperationResult | None = None):
        body = {
            "result": result_to_dict(result),
            "auth_state": result_to_dict(manager.auth_state),
            "profile": profile_to_dict(manager.current_profile),
        }
        return jsonify(body), status_for(result)

    @app.route("/api/account/register", methods=["POST"], endpoint="account_register")
    def account_register():
        data = request.get_json(silent=True) or {}
        result = asyncio.run(
            manager.register(
                email=str(data.get("email") or ""),
                password=str(data.get("password") or ""),
                name=str(data.get("name") or ""),
                role=str(data.get("role") or ""),
                student_number=str(data.get("student_number") or ""),
                department=str(data.get("department") or ""),
            )
        )
        return account_response(result)

    @app.route("/api/account/login", methods=["POST"], endpoint="account_login")
    def account_login():
        data = request.get_json(silent=True) or {}
        result = asyncio.run(manager.login(str(data.get("email") or ""), str(data.get("password") or "")))
        return account_response(result)

    @app.route("/api/account/logout", methods=["POST"], endpoint="account_logout")
    def account_logout():
        manager.logout()
        return account_response()

    @app.route("/api/account/reset-password", methods=["POST"], endpoint="account_reset_password")
    def account_reset_password():
        data = request.get_json(silent=True) or {}
        result = asyncio.run(manager.reset_password(str(data.get("email") or "")))
        return account_response(result)

    @app.route("/api/account/profile", methods=["PUT"], endpoint="account_profile")
    def account_profile():
        data = request.get_json(silent=True) or {}
        result = asyncio.run(
            manager.update_profile(
                name=str(data.get("name") or ""),
                department=str(data.get("department") or ""),
                student_number=str(data.get("student_number") or ""),
            )
        )
        return account_response(result)

    @app.route("/api/account/profile", methods=["GET"], endpoint="account_profile_get")
    def account_profile_get():
        if not manager.is_logged_in():
            return error_response(ErrorKind.AUTH, "No user logged in")
        asyncio.run(manager.refresh_profile())
        return account_response()
