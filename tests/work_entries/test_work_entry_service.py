from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from facilities_tracker.colleges.model import College
from facilities_tracker.core.enums import QualityIssue
from facilities_tracker.core.exceptions import NotFoundError, ValidationError
from facilities_tracker.work_entries.calculator.standard_calculator import StandardMetricsCalculator
from facilities_tracker.work_entries.filters import WorkEntryFilter
from facilities_tracker.work_entries.model import WorkEntry
from facilities_tracker.work_entries.service import WorkEntryService, table_totals


class FakeCollegesRepo:
    def __init__(self, colleges):
        self._items = {c.college_id: c for c in colleges}

    def list_all(self):
        return list(self._items.values())

    def get_by_id(self, college_id):
        return self._items.get(int(college_id))


class FakeWorkEntriesRepo:
    def __init__(self):
        self._next_id = 1
        self.items: dict[int, WorkEntry] = {}

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, entry_id):
        return self.items.get(int(entry_id))

    def create(self, *, data):
        entry_id = self._next_id
        self._next_id += 1
        self.items[entry_id] = WorkEntry(entry_id=entry_id, **data)
        return entry_id

    def update(self, entry_id, *, changes):
        if entry_id not in self.items:
            return False
        self.items[entry_id] = dataclasses.replace(self.items[entry_id], **changes)
        return True

    def delete(self, entry_id):
        return self.items.pop(int(entry_id), None) is not None


@pytest.fixture
def repo():
    return FakeWorkEntriesRepo()


@pytest.fixture
def svc(repo, fixed_now):
    colleges = FakeCollegesRepo([College(college_id=1, name="North")])
    return WorkEntryService(repo, colleges, StandardMetricsCalculator(), clock=lambda: fixed_now)


def _form(**kw):
    data = {"college_id": "1", "location": "Library", "work_description": "Repaint", "work_type": "painting"}
    data.update(kw)
    return data


def test_create_applies_defaults(svc, repo, fixed_now):
    entry_id = svc.create(_form(length="10", width="5"))
    entry = repo.get_by_id(entry_id)

    assert entry.date == fixed_now.date()
    assert entry.quantity == 1
    assert entry.status == "pending"
    assert entry.college_id == 1
    assert entry.final_rate is None
    assert entry.length == 10.0


def test_create_keeps_explicit_overrides(svc):
    entry_id = svc.create(_form(length="10", width="5", final_rate="999", date="2026-01-02"))
    row = svc.get(entry_id)

    assert row.entry.date == date(2026, 1, 2)
    assert row.final_rate == 999
    assert row.square_feet == 50


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"work_description": "  "}, "Work description is required"),
        ({"location": ""}, "Location is required"),
        ({"college_id": ""}, "College is required"),
        ({"college_id": "42"}, "College 42 does not exist"),
        ({"status": "done"}, "Status must be one of"),
        ({"length": "-1"}, "must not be negative"),
        ({"date": "02/01/2026"}, "Date must be YYYY-MM-DD"),
    ],
)
def test_create_validation(svc, changes, message):
    with pytest.raises(ValidationError) as exc:
        svc.create(_form(**changes))
    assert message in str(exc.value)


def test_any_status_transition_is_allowed(svc, repo):
    entry_id = svc.create(_form(status="completed"))

    svc.update(entry_id, {"status": "pending"})
    assert repo.get_by_id(entry_id).status == "pending"

    svc.update(entry_id, {"status": "In-Progress", "unknown": "ignored"})
    assert repo.get_by_id(entry_id).status == "in-progress"


def test_partial_update_only_touches_given_fields(svc, repo):
    entry_id = svc.create(_form(length="10", width="5", block="B"))
    svc.update(entry_id, {"width": "6"})

    entry = repo.get_by_id(entry_id)
    assert entry.width == 6.0
    assert entry.length == 10.0
    assert entry.block == "B"


def test_update_and_delete_unknown_entry(svc):
    with pytest.raises(NotFoundError):
        svc.update(99, {"status": "completed"})
    with pytest.raises(NotFoundError):
        svc.delete(99)
    with pytest.raises(NotFoundError):
        svc.get(99)


def test_update_without_editable_fields(svc):
    entry_id = svc.create(_form())
    with pytest.raises(ValidationError):
        svc.update(entry_id, {"entry_id": 5})


def test_list_entries_enriches_and_filters(svc):
    svc.create(_form(length="10", width="5"))
    svc.create(_form(work_type="electrical", length="2", width="2"))

    rows = svc.list_entries(WorkEntryFilter(work_type="electrical"))
    assert [r.final_rate for r in rows] == [80]

    totals = table_totals(svc.list_entries())
    assert totals.count == 2
    assert totals.total_square_feet == 54
    assert totals.total_amount == 680


def test_preview_uses_shared_calculator(svc):
    m = svc.preview({"length": "10", "width": "5", "work_type": "painting"})
    assert m.final_rate == 600
    assert svc.calculator.for_fields({"length": "10", "width": "5", "work_type": "painting"}) == m


def test_purge_removes_flagged_entries(svc, repo):
    keep = svc.create(_form())
    svc.create(_form(work_description="Test entry"))
    repo.items[99] = WorkEntry(
        entry_id=99, college_id=7, location="X", work_description="Orphan", work_type="painting", date="2026-01-01"
    )

    assert svc.quality_report().counts()["orphaned"] == 1
    assert svc.purge(QualityIssue.TEST) == 1
    assert svc.purge("orphaned") == 1
    assert list(repo.items) == [keep]


def test_saved_numbers_parse_like_the_preview(svc, repo):
    fields = _form(length="1,250", width="2", quantity="1,000")
    entry_id = svc.create(fields)
    entry = repo.get_by_id(entry_id)

    assert entry.length == 1250
    assert entry.quantity == 1000
    assert svc.get(entry_id).square_feet == svc.preview(fields).square_feet


@pytest.mark.parametrize(
    "changes",
    [
        {"length": "nan"},
        {"width": "inf"},
        {"final_rate": "-inf"},
        {"quantity": "inf"},
        {"quantity": "abc"},
    ],
)
def test_non_finite_numbers_are_rejected(svc, repo, changes):
    with pytest.raises(ValidationError):
        svc.create(_form(**changes))
    assert repo.items == {}
