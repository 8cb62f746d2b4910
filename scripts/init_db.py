from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.course_attendance.course_attendance.core.logging import setup_logging
from src.course_attendance.course_attendance.database.bootstrap import apply_identity_schema, list_tables
from src.course_attendance.course_attendance.database.connection import DatabaseConnection, DBConfig
from src.course_attendance.course_attendance.main import load_settings


def main() -> None:
    settings = load_settings()
    setup_logging(settings.get("LOG_LEVEL", "INFO"))

    db = DBConfig.from_mapping(settings["DB_CONFIG"])
    conn = DatabaseConnection(db)
    apply_identity_schema(conn)
    tables = list_tables(conn)
    print(f"OK: identity schema -> {db.user}@{db.host}:{db.port}/{db.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
