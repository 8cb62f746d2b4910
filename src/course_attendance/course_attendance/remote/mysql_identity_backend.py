from __future__ import annotations

import secrets
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional

import mysql.connector
import structlog
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import RemoteError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .backend import IdentityBackend

logger = structlog.get_logger(__name__)

_PROFILE_FIELDS = ("email", "name", "role", "student_number", "department")


@contextmanager
def _remote_call(operation: str) -> Iterator[None]:
    try:
        yield
    except (mysql.connector.errors.InterfaceError, mysql.connector.errors.OperationalError) as exc:
        logger.warning("identity_backend_unreachable", operation=operation, error=str(exc))
        raise RemoteError("A network error occurred while contacting the identity service") from exc
    except mysql.connector.Error as exc:
        logger.warning("identity_backend_error", operation=operation, error=str(exc))
        raise RemoteError(f"Identity service error during {operation}") from exc


class MySQLIdentityBackend(IdentityBackend):
    """Identity service kept in MySQL: accounts, profile documents and reset requests.

    The signed-in account is tracked per backend instance, like a client SDK
    that remembers its current user.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._current_account_id: Optional[str] = None

    def current_account_id(self) -> Optional[str]:
        return self._current_account_id

    def _find_account(self, cur, email: str) -> Optional[dict[str, Any]]:
        cur.execute("SELECT account_id, password_hash FROM accounts WHERE email=%s", (email,))
        return fetchone(cur)

    def create_account(self, email: str, password: str) -> str:
        account_id = str(uuid.uuid4())
        try:
            with _remote_call("create_account"), db_cursor(self._conn_factory) as cur:
                cur.execute(
                    "INSERT INTO accounts(account_id, email, password_hash) VALUES(%s,%s,%s)",
                    (account_id, email, generate_password_hash(password)),
                )
        except RemoteError as exc:
            if isinstance(exc.__cause__, mysql.connector.errors.IntegrityError):
                raise RemoteError("The email address is already in use by another account") from exc.__cause__
            raise
        self._current_account_id = account_id
        return account_id

    def sign_in(self, email: str, password: str) -> str:
        with _remote_call("sign_in"), db_cursor(self._conn_factory) as cur:
            row = self._find_account(cur, email)
        if row is None:
            raise RemoteError("There is no account for this email")
        if not check_password_hash(row["password_hash"], password):
            raise RemoteError("The password is invalid")
        self._current_account_id = str(row["account_id"])
        return self._current_account_id

    def sign_out(self) -> None:
        self._current_account_id = None

    def get_document(self, account_id: str) -> Optional[dict[str, Any]]:
        with _remote_call("get_document"), db_cursor(self._conn_factory) as cur:
            cur.execute(
                "SELECT email, name, role, student_number, department FROM profiles WHERE account_id=%s",
                (account_id,),
            )
            row = fetchone(cur)
        return row

    def set_document(self, account_id: str, data: Mapping[str, Any]) -> None:
        values = [str(data.get(f) or "") for f in _PROFILE_FIELDS]
        with _remote_call("set_document"), db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                REPLACE INTO profiles(account_id, email, name, role, student_number, department)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (account_id, *values),
            )

    def update_document(self, account_id: str, updates: Mapping[str, Any]) -> None:
        fields = [f for f in _PROFILE_FIELDS if f in updates]
        if not fields:
            return
        assignments = ", ".join(f"{f}=%s" for f in fields)
        with _remote_call("update_document"), db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"UPDATE profiles SET {assignments} WHERE account_id=%s",
                (*[str(updates[f] or "") for f in fields], account_id),
            )
            if cur.rowcount == 0:
                raise RemoteError("Profile document not found")

    def send_password_reset_email(self, email: str) -> None:
        """Queue a reset token; the mail sender delivers rows with sent_at NULL."""
        token = secrets.token_urlsafe(32)
        with _remote_call("send_password_reset_email"), db_cursor(self._conn_factory) as cur:
            row = self._find_account(cur, email)
            if row is None:
                raise RemoteError("There is no account for this email")
            cur.execute(
                "INSERT INTO password_resets(token, account_id) VALUES(%s,%s)",
                (token, row["account_id"]),
            )
        logger.info("password_reset_requested", account_id=str(row["account_id"]))
