from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_attendance.hr_attendance.database.bootstrap import apply_seed_sql


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())

    for name, db_config in (("hr", settings.HR_DB_CONFIG), ("attendance", settings.ATTENDANCE_DB_CONFIG)):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / f"{name}_seed.sql")
        logging.info("OK: seeded %s -> %s/%s", name, db_config.get("host"), db_config.get("database"))


if __name__ == "__main__":
    main()
