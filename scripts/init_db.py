from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_attendance.hr_attendance.database.bootstrap import apply_schema, list_tables


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())

    for name, db_config in (("hr", settings.HR_DB_CONFIG), ("attendance", settings.ATTENDANCE_DB_CONFIG)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / f"{name}_schema.sql")
        tables = list_tables(db_config)
        logging.info(
            "OK: %s schema -> %s@%s:%s/%s (tables=%d)",
            name, db_config.get("user"), db_config.get("host"), db_config.get("port", 3306),
            db_config.get("database"), len(tables),
        )


if __name__ == "__main__":
    main()
