from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

from ..colleges.model import College
from ..common.numbers import safe_percentage
from ..core.enums import WorkStatus
from ..work_entries.model import EnrichedWorkEntry
from .model import PerformanceRow


def compute_performance(
    rows: Sequence[EnrichedWorkEntry],
    colleges: Sequence[College],
    *,
    college_id: Optional[int | str] = None,
) -> list[PerformanceRow]:
    """Per-college completion efficiency, best first.

    Colleges without entries are kept with zero efficiency. ``sorted`` is
    stable, so equal efficiencies keep the college collection order.
    """

    by_college: dict[str, list[EnrichedWorkEntry]] = defaultdict(list)
    for r in rows:
        by_college[str(r.entry.college_id)].append(r)

    out: list[PerformanceRow] = []
    for college in colleges:
        if college_id not in (None, "", "all") and str(college.college_id) != str(college_id):
            continue
        entries = by_college.get(str(college.college_id), [])
        completed = sum(1 for r in entries if r.entry.status == WorkStatus.COMPLETED.value)
        out.append(
            PerformanceRow(
                college_id=college.college_id,
                college=college.name,
                total_tasks=len(entries),
                tasks_completed=completed,
                total_cost=sum(r.final_rate for r in entries),
                efficiency=safe_percentage(completed, len(entries)),
            )
        )

    return sorted(out, key=lambda p: p.efficiency, reverse=True)
