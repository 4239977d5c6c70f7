from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

# Raw numeric fields arrive as numbers from the database and as strings from forms.
NumberLike = Union[int, float, Decimal, str, None]


@dataclass(frozen=True)
class WorkEntry:
    """Domain entity: one billable unit of facility work.

    ``status`` is kept as the raw stored string so unexpected values from the
    data source survive into the statistics instead of failing the read.
    """

    entry_id: int
    college_id: Optional[int]
    location: str
    work_description: str
    work_type: str
    date: Union[date, str, None]
    status: str = "pending"
    block: Optional[str] = None
    floor: Optional[str] = None
    work_area_or_room: Optional[str] = None
    length: NumberLike = None
    width: NumberLike = None
    height: NumberLike = None
    quantity: NumberLike = None
    square_feet: NumberLike = None
    rate_per_sqft: NumberLike = None
    final_rate: NumberLike = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    college_name: Optional[str] = None
    college_location: Optional[str] = None


@dataclass(frozen=True)
class WorkEntryMetrics:
    square_feet: float
    rate_per_sqft: float
    final_rate: float


@dataclass(frozen=True)
class EnrichedWorkEntry:
    """Read-model: a work entry together with its derived metrics."""

    entry: WorkEntry
    metrics: WorkEntryMetrics

    @property
    def square_feet(self) -> float:
        return self.metrics.square_feet

    @property
    def rate_per_sqft(self) -> float:
        return self.metrics.rate_per_sqft

    @property
    def final_rate(self) -> float:
        return self.metrics.final_rate
