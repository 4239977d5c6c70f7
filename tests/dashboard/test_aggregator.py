from __future__ import annotations

import math
from datetime import date

import pytest

from facilities_tracker.colleges.model import College
from facilities_tracker.core.enums import EmployeeCountPolicy
from facilities_tracker.dashboard.aggregator import active_college_ids, compute_dashboard_stats, employee_total
from facilities_tracker.employees.model import Employee
from facilities_tracker.work_entries.calculator.standard_calculator import StandardMetricsCalculator
from facilities_tracker.work_entries.model import WorkEntry

TODAY = date(2026, 2, 18)


def _entry(entry_id: int, **kw) -> WorkEntry:
    base = dict(
        college_id=1,
        location="Block A",
        work_description="Work",
        work_type="painting",
        date="2026-02-10",
        status="pending",
    )
    base.update(kw)
    return WorkEntry(entry_id=entry_id, **base)


def _rows(*entries):
    return StandardMetricsCalculator().enrich(entries)


def _employee(employee_id: int) -> Employee:
    return Employee(
        employee_id=employee_id,
        name=f"E{employee_id}",
        email=f"e{employee_id}@example.com",
        role="worker",
        department="Maintenance",
    )


COLLEGES = [College(college_id=1, name="North"), College(college_id=2, name="South")]


def test_empty_inputs_give_all_zero_snapshot():
    stats = compute_dashboard_stats([], [], [], today=TODAY)

    for name, value in stats.as_dict().items():
        assert value == 0, name


def test_estimate_policy_never_reports_zero_employees():
    assert employee_total(0, None, EmployeeCountPolicy.ESTIMATE) == 1
    assert employee_total(12, None, "estimate") == 2
    assert employee_total(12, [_employee(1), _employee(2), _employee(3)], "actual") == 3
    assert employee_total(12, None, "actual") == 0


def test_status_counts_and_totals():
    rows = _rows(
        _entry(1, status="pending", final_rate=100),
        _entry(2, status="in-progress", final_rate=200),
        _entry(3, status="completed", final_rate=300),
        _entry(4, status="completed", final_rate=400),
    )
    stats = compute_dashboard_stats(rows, COLLEGES, [_employee(1)], today=TODAY)

    assert stats.total_tasks == 4
    assert (stats.pending_tasks, stats.in_progress_tasks, stats.completed_tasks) == (1, 1, 2)
    assert stats.pending_tasks + stats.in_progress_tasks + stats.completed_tasks == stats.total_tasks
    assert stats.total_cost_all_time == 1000
    assert stats.avg_cost_per_task == 250
    assert stats.total_colleges == 2
    assert stats.total_employees == 1


def test_week_starts_on_sunday_and_month_on_first_day():
    rows = _rows(
        _entry(1, date="2026-02-15", final_rate=100),  # Sunday
        _entry(2, date="2026-02-14", final_rate=10),  # Saturday before
        _entry(3, date="2026-01-31", final_rate=1),
        _entry(4, date="garbage", final_rate=1000),
    )
    stats = compute_dashboard_stats(rows, COLLEGES, today=TODAY)

    assert stats.total_cost_this_week == 100
    assert stats.total_cost_this_month == 110
    assert stats.total_cost_all_time == 1111


def test_dimension_statistics():
    rows = _rows(
        _entry(1, length=10, width=5, height=2),  # 100 sqft
        _entry(2, length=5, width=10),  # 50 sqft
        _entry(3, length=30, width=20),  # 600 sqft
        _entry(4, square_feet=500),
        _entry(5),
    )
    stats = compute_dashboard_stats(rows, COLLEGES, today=TODAY)

    assert stats.entries_with_dimensions == 3
    assert stats.entries_without_dimensions == 2
    assert stats.complete_dimension_percentage == pytest.approx(60.0)
    assert stats.avg_length == pytest.approx(15.0)
    assert stats.avg_width == pytest.approx(35 / 3)
    assert stats.avg_height == pytest.approx(2 / 3)
    assert stats.total_square_feet == 1250
    assert stats.largest_area == 600
    assert stats.smallest_area == 50
    assert stats.avg_square_feet == pytest.approx(1250 / 4)
    assert (stats.small_projects, stats.medium_projects, stats.large_projects) == (1, 2, 1)


def test_percentages_stay_in_bounds_and_finite():
    rows = _rows(_entry(1, length="bad", width=float("inf")), _entry(2, length=1, width=1))
    stats = compute_dashboard_stats(rows, COLLEGES, today=TODAY)

    assert 0 <= stats.complete_dimension_percentage <= 100
    for value in stats.as_dict().values():
        assert math.isfinite(value)


def test_active_colleges_count_entry_side_references_only():
    rows = _rows(
        _entry(1, college_id=1),
        _entry(2, college_id=1),
        _entry(3, college_id=99),
        _entry(4, college_id=None),
    )
    stats = compute_dashboard_stats(rows, COLLEGES, today=TODAY)

    assert active_college_ids(rows) == {"1", "99"}
    assert stats.active_colleges == 2
    assert stats.total_colleges == 2
