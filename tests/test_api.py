from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.hr_attendance.hr_attendance.attendance.model import RawPunch
from src.hr_attendance.hr_attendance.auth.identity_provider import StaticTokenIdentityProvider
from src.hr_attendance.hr_attendance.container import assemble
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.main import create_app
from src.hr_attendance.hr_attendance.settings.model import CompanySettings
from tests.fakes import InMemoryEmployees, InMemoryPunches, InMemorySettings

AUTH = {"Authorization": "Bearer test-token"}


def _client(monkeypatch, *, punches_fail=False):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble(
        employees_repo=InMemoryEmployees([Employee(employee_id="E7", employee_code="NV00007", name="C")]),
        punches_repo=InMemoryPunches(
            [
                RawPunch("00007", "2024-07-10T01:00:00Z"),
                RawPunch("00007", "2024-07-10T10:30:00Z"),
                RawPunch("00099", datetime(2024, 7, 11, 2, 0, tzinfo=timezone.utc)),
            ],
            fail=punches_fail,
        ),
        settings_repo=InMemorySettings(CompanySettings(working_days_per_month=22)),
        identity_provider=StaticTokenIdentityProvider({"test-token": "tester"}),
    )
    return create_app(container).test_client()


def test_summary_get(monkeypatch):
    client = _client(monkeypatch)

    resp = client.get("/api/attendance/summary?month=7&year=2024", headers=AUTH)

    assert resp.status_code == 200
    data = resp.get_json()
    assert data[0] == {
        "employee_id": "E7",
        "employee_code": "NV00007",
        "employee_name": "C",
        "linked": True,
        "date": "2024-07-10",
        "check_in": "2024-07-10T01:00:00Z",
        "check_out": "2024-07-10T10:30:00Z",
        "working_hours": 9.5,
        "work_value": 1.0,
        "overtime_hours": 1.5,
    }
    assert data[1]["employee_id"] == "finger:99"
    assert data[1]["linked"] is False


def test_summary_post_body(monkeypatch):
    client = _client(monkeypatch)

    resp = client.post("/api/attendance/summary", json={"month": 7, "year": 2024}, headers=AUTH)

    assert resp.status_code == 200
    assert len(resp.get_json()) == 2


def test_non_object_json_body_is_400(monkeypatch):
    client = _client(monkeypatch)

    resp = client.post("/api/attendance/summary", json=[7, 2024], headers=AUTH)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "request body must be a JSON object"


def test_invalid_month_is_400(monkeypatch):
    client = _client(monkeypatch)

    resp = client.get("/api/attendance/summary?month=13&year=2024", headers=AUTH)

    assert resp.status_code == 400
    assert "month" in resp.get_json()["error"]


def test_upstream_failure_is_500(monkeypatch):
    client = _client(monkeypatch, punches_fail=True)

    resp = client.get("/api/attendance/summary?month=7&year=2024", headers=AUTH)

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "attendance store is down"


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer wrong"}, {"Authorization": "Basic test-token"}])
def test_missing_or_bad_token_is_401(monkeypatch, headers):
    client = _client(monkeypatch)

    resp = client.get("/api/attendance/summary?month=7&year=2024", headers=headers)

    assert resp.status_code == 401


def test_employee_month_endpoint(monkeypatch):
    client = _client(monkeypatch)

    resp = client.get("/api/attendance/employee/E7?month=7&year=2024", headers=AUTH)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["employee"]["id"] == "E7"
    assert len(body["attendance_records"]) == 1
    assert body["summary"]["present_days"] == 1.0
    assert body["summary"]["weekday_overtime_hours"] == 1.5
    assert body["summary"]["working_days"] == 22


def test_employee_month_unknown_is_404(monkeypatch):
    client = _client(monkeypatch)

    resp = client.get("/api/attendance/employee/E404?month=7&year=2024", headers=AUTH)

    assert resp.status_code == 404


def test_health_needs_no_token(monkeypatch):
    client = _client(monkeypatch)

    assert client.get("/api/health").status_code == 200
