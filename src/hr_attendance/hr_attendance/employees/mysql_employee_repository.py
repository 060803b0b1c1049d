from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["id"]),
        employee_code=str(row.get("employee_code") or ""),
        name=str(row.get("name") or ""),
        is_active=str(row.get("status") or "active").lower() != "inactive",
        department=row.get("department_name"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_identities(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.employee_code, e.name, e.status, d.name AS department_name
                FROM employees e
                LEFT JOIN departments d ON d.id = e.department_id
                WHERE e.employee_code IS NOT NULL
                ORDER BY e.employee_code ASC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.employee_code, e.name, e.status, d.name AS department_name
                FROM employees e
                LEFT JOIN departments d ON d.id = e.department_id
                WHERE e.id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None
