from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class DashboardStats:
    """Snapshot of the work entry collection shown on the dashboard."""

    total_colleges: int = 0
    active_colleges: int = 0
    total_tasks: int = 0
    pending_tasks: int = 0
    in_progress_tasks: int = 0
    completed_tasks: int = 0
    total_employees: int = 0
    total_cost_this_month: float = 0.0
    total_cost_all_time: float = 0.0
    total_cost_this_week: float = 0.0
    avg_cost_per_task: float = 0.0
    total_square_feet: float = 0.0
    entries_with_dimensions: int = 0
    entries_without_dimensions: int = 0
    avg_length: float = 0.0
    avg_width: float = 0.0
    avg_height: float = 0.0
    avg_square_feet: float = 0.0
    largest_area: float = 0.0
    smallest_area: float = 0.0
    small_projects: int = 0
    medium_projects: int = 0
    large_projects: int = 0
    complete_dimension_percentage: float = 0.0

    def as_dict(self) -> dict:
        return asdict(self)
