from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.volunteer_attendance.volunteer_attendance.database.connection import DatabaseConnection, DBConfig
from src.volunteer_attendance.volunteer_attendance.database.mysql_base import db_cursor
from src.volunteer_attendance.volunteer_attendance.main import load_settings


def main() -> None:
    settings = load_settings()
    config = DBConfig.from_settings(dict(settings.DB_CONFIG))

    # schema.sql holds plain DDL only, so splitting on ';' is safe.
    sql = (REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8")
    statements = [s.strip() for s in sql.split(";") if s.strip()]

    with db_cursor(DatabaseConnection(config), dictionary=False) as (_, cur):
        for stmt in statements:
            cur.execute(stmt)
        cur.execute("SHOW TABLES")
        tables = [row[0] for row in cur.fetchall()]

    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
