from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _bootstrap_databases(settings) -> None:
    stores = (
        ("hr", getattr(settings, "HR_DB_CONFIG")),
        ("attendance", getattr(settings, "ATTENDANCE_DB_CONFIG")),
    )
    for name, db_config in stores:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=DATABASE_DIR / f"{name}_schema.sql")
            logger.info("%s schema ready (tables=%d)", name, len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / f"{name}_seed.sql")
            logger.info("%s demo seed ready", name)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        hr = getattr(settings, "HR_DB_CONFIG")
        att = getattr(settings, "ATTENDANCE_DB_CONFIG")
        logger.info(
            "settings=%s hr_db=%s@%s:%s/%s attendance_db=%s@%s:%s/%s",
            settings_module,
            hr.get("user"), hr.get("host"), hr.get("port", 3306), hr.get("database"),
            att.get("user"), att.get("host"), att.get("port", 3306), att.get("database"),
        )
        _bootstrap_databases(settings)
        container = build_container(settings)

    app.extensions["container"] = container
    register_attendance(app, container)

    return app
