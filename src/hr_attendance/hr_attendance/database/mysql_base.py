from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import UpstreamUnavailable
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _release(action, what: str, database: str) -> None:
    # A dropped connection fails here too; the original error is what the caller needs.
    try:
        action()
    except mysql.connector.Error as exc:
        logger.warning("%s failed on %s: %s", what, database, exc)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); driver errors surface as UpstreamUnavailable."""
    database = conn_factory.config.database
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise UpstreamUnavailable(f"Cannot connect to {database}: {exc}") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            _release(cur.close, "cursor close", database)
    except mysql.connector.Error as exc:
        _release(conn.rollback, "rollback", database)
        raise UpstreamUnavailable(f"Query failed on {database}: {exc}") from exc
    except Exception:
        _release(conn.rollback, "rollback", database)
        raise
    finally:
        _release(conn.close, "close", database)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def quote_identifier(name: str) -> str:
    """Backtick-quote a configured table/column name after validating it."""
    if not name or not _IDENTIFIER_RE.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return f"`{name}`"
