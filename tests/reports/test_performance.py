from __future__ import annotations

from datetime import date

from facilities_tracker.colleges.model import College
from facilities_tracker.dashboard.aggregator import compute_dashboard_stats
from facilities_tracker.reports.performance import compute_performance
from facilities_tracker.work_entries.calculator.standard_calculator import StandardMetricsCalculator
from facilities_tracker.work_entries.model import WorkEntry
from facilities_tracker.work_entries.quality import find_orphaned


def _entry(entry_id: int, college_id, status="pending", final_rate=100) -> WorkEntry:
    return WorkEntry(
        entry_id=entry_id,
        college_id=college_id,
        location="Hall",
        work_description="Work",
        work_type="painting",
        date="2026-02-01",
        status=status,
        final_rate=final_rate,
    )


def _rows(*entries):
    return StandardMetricsCalculator().enrich(entries)


def test_college_without_entries_is_listed_with_zero_efficiency():
    rows = compute_performance([], [College(college_id=1, name="Lonely")])

    assert len(rows) == 1
    assert rows[0].college == "Lonely"
    assert rows[0].total_tasks == 0
    assert rows[0].efficiency == 0


def test_sorted_by_efficiency_with_stable_ties():
    colleges = [
        College(college_id=1, name="A"),
        College(college_id=2, name="B"),
        College(college_id=3, name="C"),
    ]
    rows = _rows(
        _entry(1, 3, "completed", 250),
        _entry(2, 3, "pending", 50),
        _entry(3, 1, "pending", 10),
    )
    perf = compute_performance(rows, colleges)

    assert [p.college for p in perf] == ["C", "A", "B"]
    assert perf[0].efficiency == 50
    assert perf[0].tasks_completed == 1
    assert perf[0].total_cost == 300


def test_filter_to_one_college():
    colleges = [College(college_id=1, name="A"), College(college_id=2, name="B")]
    perf = compute_performance(_rows(_entry(1, 2, "completed")), colleges, college_id="2")

    assert [(p.college, p.efficiency) for p in perf] == [("B", 100)]


def test_orphaned_entry_counts_as_active_but_has_no_performance_row():
    colleges = [College(college_id=1, name="A")]
    rows = _rows(_entry(1, 1), _entry(2, 99, "completed"))

    assert [e.entry_id for e in find_orphaned([r.entry for r in rows], colleges)] == [2]

    stats = compute_dashboard_stats(rows, colleges, today=date(2026, 2, 18))
    assert stats.active_colleges == 2

    perf = compute_performance(rows, colleges)
    assert [p.college_id for p in perf] == [1]
    assert perf[0].total_tasks == 1
