from __future__ import annotations

from datetime import datetime, timezone

import mysql.connector
import pytest

from src.hr_attendance.hr_attendance.attendance.mysql_punch_repository import MySQLPunchEventRepository
from src.hr_attendance.hr_attendance.core.exceptions import UpstreamUnavailable
from src.hr_attendance.hr_attendance.database.bootstrap import iter_sql_statements
from src.hr_attendance.hr_attendance.database.connection import DBConfig
from src.hr_attendance.hr_attendance.database.mysql_base import quote_identifier


class FakeCursor:
    def __init__(self, rows, error=None):
        self._rows = rows
        self._error = error
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        if self._error:
            raise self._error
        self.executed.append((sql, params))

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    config = DBConfig(host="h", port=3306, user="u", password="p", database="attendance_db")

    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def test_punch_repository_reads_window_with_naive_utc_bounds():
    cursor = FakeCursor([{"device_id": 7, "punched_at": datetime(2024, 7, 10, 1, 0)}])
    conn = FakeConn(cursor)
    repo = MySQLPunchEventRepository(FakeConnFactory(conn), table="att_log", device_column="pin", time_column="ts")

    rows = repo.list_between(datetime(2024, 7, 1, tzinfo=timezone.utc), datetime(2024, 8, 1, tzinfo=timezone.utc))

    assert rows[0].device_id == "7"
    assert rows[0].timestamp == datetime(2024, 7, 10, 1, 0)
    sql, params = cursor.executed[0]
    assert "FROM `att_log`" in sql
    assert params == (datetime(2024, 7, 1), datetime(2024, 8, 1))
    assert conn.committed and conn.closed


def test_driver_error_becomes_upstream_unavailable():
    conn = FakeConn(FakeCursor([], error=mysql.connector.Error("lost connection")))
    repo = MySQLPunchEventRepository(FakeConnFactory(conn))

    with pytest.raises(UpstreamUnavailable):
        repo.list_between(datetime(2024, 7, 1, tzinfo=timezone.utc), datetime(2024, 8, 1, tzinfo=timezone.utc))

    assert conn.rolled_back and conn.closed


@pytest.mark.parametrize("name", ["", "1table", "att; DROP TABLE x", "a`b"])
def test_quote_identifier_rejects_unsafe_names(name):
    with pytest.raises(ValueError):
        quote_identifier(name)


def test_iter_sql_statements_respects_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nCREATE TABLE x (id INT);  "

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "CREATE TABLE x (id INT)"]


class DroppedConn(FakeConn):
    def rollback(self):
        raise mysql.connector.errors.OperationalError("MySQL Connection not available")

    def close(self):
        raise mysql.connector.errors.OperationalError("MySQL Connection not available")


def test_lost_connection_still_surfaces_as_upstream_unavailable():
    cursor = FakeCursor([], error=mysql.connector.errors.OperationalError("Lost connection"))
    repo = MySQLPunchEventRepository(FakeConnFactory(DroppedConn(cursor)))

    with pytest.raises(UpstreamUnavailable) as excinfo:
        repo.list_between(datetime(2024, 7, 1, tzinfo=timezone.utc), datetime(2024, 8, 1, tzinfo=timezone.utc))

    assert "Lost connection" in str(excinfo.value)
    assert cursor.closed
