from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, state_response
from ..core.enums import ErrorKind, Role, parse_role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/state", methods=["GET"], endpoint="state")
    def state():
        return state_response(store)

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = request.get_json(silent=True) or {}
        try:
            role = parse_role(data.get("role") or Role.STUDENT.value)
        except ValueError:
            return error_response(ErrorKind.VALIDATION, "Unknown role")

        result = store.register(
            str(data.get("name") or ""),
            str(data.get("email") or ""),
            str(data.get("password") or ""),
            role,
        )
        return state_response(store, result)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = request.get_json(silent=True) or {}
        result = store.login(
            str(data.get("email") or ""),
            str(data.get("password") or ""),
            remember_me=bool(data.get("remember_me", False)),
        )
        return state_response(store, result)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        return state_response(store, store.logout())

    @app.route("/api/auth/saved-credentials", methods=["GET"], endpoint="auth_saved_credentials")
    def auth_saved_credentials():
        # Pre-fills the login form; the password is only returned when remembered.
        saved = store.saved_credentials()
        return jsonify(
            {
                "email": saved.email,
                "password": saved.password if saved.remember_me else "",
                "remember_me": saved.remember_me,
            }
        )

    @app.route("/api/messages/clear", methods=["POST"], endpoint="messages_clear")
    def messages_clear():
        store.clear_messages()
        return state_response(store)
