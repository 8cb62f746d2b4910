from __future__ import annotations

from typing import Sequence

import structlog

from .connection import DatabaseConnection

logger = structlog.get_logger(__name__)

IDENTITY_SCHEMA: Sequence[str] = (
    """
    CREATE TABLE IF NOT EXISTS accounts (
        account_id CHAR(36) PRIMARY KEY,
        email VARCHAR(255) NOT NULL UNIQUE,
        password_hash VARCHAR(255) NOT NULL,
        created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS profiles (
        account_id CHAR(36) PRIMARY KEY,
        email VARCHAR(255) NOT NULL,
        name VARCHAR(255) NOT NULL DEFAULT '',
        role VARCHAR(32) NOT NULL DEFAULT '',
        student_number VARCHAR(64) NOT NULL DEFAULT '',
        department VARCHAR(255) NOT NULL DEFAULT '',
        updated_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
        FOREIGN KEY (account_id) REFERENCES accounts (account_id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS password_resets (
        token VARCHAR(64) PRIMARY KEY,
        account_id CHAR(36) NOT NULL,
        requested_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
        sent_at DATETIME NULL,
        FOREIGN KEY (account_id) REFERENCES accounts (account_id) ON DELETE CASCADE
    )
    """,
)


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_identity_schema(conn_factory: DatabaseConnection) -> None:
    """Create the identity tables (idempotent: CREATE IF NOT EXISTS)."""
    ensure_database_exists(conn_factory)
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in IDENTITY_SCHEMA:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("identity_schema_ready", database=conn_factory.config.database)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in cur.fetchall()]
    finally:
        conn.close()
