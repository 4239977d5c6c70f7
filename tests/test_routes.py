from __future__ import annotations

import dataclasses

import pytest

from facilities_tracker.attendance.model import AttendanceRecord
from facilities_tracker.colleges.model import College
from facilities_tracker.container import wire
from facilities_tracker.core.exceptions import DataSourceError
from facilities_tracker.employees.model import Employee
from facilities_tracker.main import create_app
from facilities_tracker.work_entries.model import WorkEntry


class InMemoryRepo:
    """Minimal repository over a dict; ``model`` is built with the id keyword."""

    def __init__(self, model, id_field, items=()):
        self._model = model
        self._id_field = id_field
        self.items = {getattr(i, id_field): i for i in items}
        self._next_id = max(self.items, default=0) + 1

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, item_id):
        return self.items.get(int(item_id))

    def get_by_email(self, email):
        return next((i for i in self.items.values() if getattr(i, "email", None) == email), None)

    def create(self, *, data):
        item_id = self._next_id
        self._next_id += 1
        self.items[item_id] = self._model(**{self._id_field: item_id}, **data)
        return item_id

    def update(self, item_id, *, changes):
        self.items[item_id] = dataclasses.replace(self.items[item_id], **changes)
        return True

    def delete(self, item_id):
        return self.items.pop(int(item_id), None) is not None


class BrokenRepo(InMemoryRepo):
    def list_all(self):
        raise DataSourceError("Database is unavailable")


@pytest.fixture
def work_entries():
    return InMemoryRepo(
        WorkEntry,
        "entry_id",
        [
            WorkEntry(
                entry_id=1,
                college_id=1,
                location="Library",
                work_description="Repaint walls",
                work_type="painting",
                date="2026-02-10",
                status="completed",
                length=10,
                width=5,
                college_name="North",
            )
        ],
    )


@pytest.fixture
def client(monkeypatch, work_entries):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire(
        colleges_repo=InMemoryRepo(College, "college_id", [College(1, "North"), College(2, "South")]),
        work_entries_repo=work_entries,
        employees_repo=InMemoryRepo(Employee, "employee_id", [Employee(1, "Asha", "asha@example.com", "worker", "Paint")]),
        attendance_repo=InMemoryRepo(AttendanceRecord, "attendance_id"),
    )
    app = create_app(container)
    return app.test_client()


def test_dashboard_returns_stats(client):
    resp = client.get("/api/dashboard")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["success"] is True
    assert body["data"]["total_tasks"] == 1
    assert body["data"]["total_cost_all_time"] == 600
    assert body["data"]["total_employees"] == 1
    assert body["data"]["total_colleges"] == 2


def test_list_entries_with_totals_and_filter(client):
    body = client.get("/api/work-entries").get_json()
    assert body["data"]["totals"] == {"count": 1, "total_square_feet": 50, "total_amount": 600}
    assert body["data"]["entries"][0]["metrics"]["rate_per_sqft"] == 12

    body = client.get("/api/work-entries?status=pending").get_json()
    assert body["data"]["entries"] == []


def test_create_entry_and_validation_error(client):
    resp = client.post(
        "/api/work-entries",
        json={"college_id": 2, "location": "Gym", "work_description": "Fix lights", "work_type": "electrical"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"]["entry"]["status"] == "pending"

    resp = client.post("/api/work-entries", json={"college_id": 2, "location": "Gym"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Work description is required"}


def test_missing_entry_is_404(client):
    assert client.get("/api/work-entries/99").status_code == 404
    assert client.delete("/api/work-entries/99").status_code == 404


def test_preview(client):
    resp = client.post("/api/work-entries/preview", data={"length": "4", "width": "5", "work_type": "masonry"})
    assert resp.get_json()["data"] == {"square_feet": 20, "rate_per_sqft": 25, "final_rate": 500}


def test_performance_and_trends(client):
    perf = client.get("/api/reports/performance").get_json()["data"]
    assert [p["college"] for p in perf] == ["North", "South"]
    assert perf[0]["efficiency"] == 100

    trends = client.get("/api/reports/trends").get_json()["data"]
    assert len(trends) == 6


def test_report_summary(client):
    data = client.get("/api/reports/summary").get_json()["data"]
    assert data["work_entries"]["completed"] == 1
    assert data["employees"]["productivity"] == 100


def test_quality_and_purge(client):
    data = client.get("/api/work-entries/quality").get_json()["data"]
    assert data["counts"] == {"duplicate": 0, "incomplete": 1, "test": 0, "orphaned": 0}

    assert client.post("/api/work-entries/quality/bogus/purge").status_code == 400
    resp = client.post("/api/work-entries/quality/incomplete/purge")
    assert resp.get_json()["data"] == {"deleted": 1}


def test_exports(client):
    resp = client.get("/api/work-entries/export.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.data.startswith(b"\xef\xbb\xbf")

    resp = client.get("/api/work-entries/export.xlsx")
    assert resp.status_code == 200
    assert resp.data[:2] == b"PK"

    assert client.get("/api/attendance/export.xlsx").status_code == 404


def test_employee_and_college_crud(client):
    resp = client.post(
        "/api/employees", json={"name": "Ben", "email": "ben@example.com", "role": "worker", "department": "Paint"}
    )
    assert resp.status_code == 201
    assert client.get("/api/employees/summary").get_json()["data"]["total"] == 2

    resp = client.post("/api/colleges", json={"name": "East"})
    assert resp.status_code == 201
    assert resp.get_json()["data"] == {"college_id": 3}


def test_data_source_failure_maps_to_503(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire(
        colleges_repo=InMemoryRepo(College, "college_id"),
        work_entries_repo=BrokenRepo(WorkEntry, "entry_id"),
        employees_repo=InMemoryRepo(Employee, "employee_id"),
        attendance_repo=InMemoryRepo(AttendanceRecord, "attendance_id"),
    )
    resp = create_app(container).test_client().get("/api/dashboard")

    assert resp.status_code == 503
    assert resp.get_json()["success"] is False


def test_attendance_filters_and_bad_dates(client):
    for data in (
        {"employee_id": 1, "date": "2026-02-02", "check_in": "09:00", "check_out": "17:00"},
        {"employee_id": 1, "date": "2026-02-03", "check_in": "09:00"},
    ):
        assert client.post("/api/attendance", json=data).status_code == 201

    rows = client.get("/api/attendance?check_in=not-checked-out&employee_id=1").get_json()["data"]
    assert [r["date"] for r in rows] == ["2026-02-03"]

    resp = client.get("/api/attendance/export.xlsx?check_in=checked-out")
    assert resp.status_code == 200

    assert client.get("/api/attendance?check_in=bogus").status_code == 400
    assert client.get("/api/attendance?start=2026-13-01").status_code == 400
    assert client.get("/api/dashboard?date_from=2026-02-30").status_code == 400


def test_non_numeric_write_is_400(client):
    resp = client.post(
        "/api/work-entries",
        json={"college_id": 1, "location": "Gym", "work_description": "Fix", "quantity": "inf"},
    )
    assert resp.status_code == 400
    resp = client.post("/api/attendance", json={"employee_id": 1, "date": "2026-02-02", "check_in": 930})
    assert resp.status_code == 400
