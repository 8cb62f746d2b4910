from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

from .connection import DatabaseConnection

logger = structlog.get_logger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor on a fresh connection, committed on clean exit."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        logger.debug("db_rollback", database=conn_factory.config.database)
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None
