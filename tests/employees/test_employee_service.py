from __future__ import annotations

import dataclasses

import pytest

from facilities_tracker.core.exceptions import NotFoundError, ValidationError
from facilities_tracker.employees.model import Employee
from facilities_tracker.employees.service import EmployeeService, filter_employees, summarize


class FakeEmployeesRepo:
    def __init__(self):
        self._next_id = 1
        self.items: dict[int, Employee] = {}

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, employee_id):
        return self.items.get(int(employee_id))

    def get_by_email(self, email):
        return next((e for e in self.items.values() if e.email == email), None)

    def create(self, *, data):
        employee_id = self._next_id
        self._next_id += 1
        self.items[employee_id] = Employee(employee_id=employee_id, **data)
        return employee_id

    def update(self, employee_id, *, changes):
        self.items[employee_id] = dataclasses.replace(self.items[employee_id], **changes)
        return True

    def delete(self, employee_id):
        return self.items.pop(int(employee_id), None) is not None


@pytest.fixture
def repo():
    return FakeEmployeesRepo()


@pytest.fixture
def svc(repo):
    return EmployeeService(repo)


def _form(**kw):
    data = {"name": "Ravi", "email": "Ravi@Example.com", "role": "worker", "department": "Maintenance", "salary": "1200"}
    data.update(kw)
    return data


def test_create_normalises_and_defaults(svc, repo):
    employee_id = svc.create(_form())
    emp = repo.get_by_id(employee_id)

    assert emp.email == "ravi@example.com"
    assert emp.status == "active"
    assert emp.salary == 1200
    assert emp.college_id is None


def test_email_must_be_unique(svc):
    first = svc.create(_form())
    with pytest.raises(ValidationError):
        svc.create(_form(name="Other"))

    other = svc.create(_form(email="other@example.com"))
    with pytest.raises(ValidationError):
        svc.update(other, {"email": "ravi@example.com"})
    svc.update(first, {"email": "ravi@example.com", "department": "Electrical"})


@pytest.mark.parametrize(
    "changes",
    [{"name": ""}, {"email": "not-an-email"}, {"role": "janitor"}, {"department": ""}, {"salary": "-5"}],
)
def test_create_validation(svc, changes):
    with pytest.raises(ValidationError):
        svc.create(_form(**changes))


def test_get_and_delete_unknown(svc):
    with pytest.raises(NotFoundError):
        svc.get(5)
    with pytest.raises(NotFoundError):
        svc.delete(5)


def test_summary_and_filters():
    employees = [
        Employee(1, "Asha", "asha@example.com", "worker", "Painting", salary=1000),
        Employee(2, "Ben", "ben@example.com", "supervisor", "Electrical", salary=2000, status="on-leave"),
        Employee(3, "Chen", "chen@example.com", "worker", "Plumbing", salary=1500, status="inactive"),
    ]
    summary = summarize(employees)
    assert (summary.total, summary.active, summary.on_leave, summary.inactive) == (3, 1, 1, 1)
    assert summary.average_salary == 1500

    assert [e.name for e in filter_employees(employees, role="worker")] == ["Asha", "Chen"]
    assert [e.name for e in filter_employees(employees, search="ELEC")] == ["Ben"]
    assert [e.name for e in filter_employees(employees, status="all", role="all")] == ["Asha", "Ben", "Chen"]

    assert summarize([]).average_salary == 0
