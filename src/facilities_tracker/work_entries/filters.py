from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import to_date
from ..common.numbers import is_numeric, to_number
from ..common.validators import optional_date
from .calculator.base import work_type_key
from .model import EnrichedWorkEntry

_ANY = {"", "all"}


def _constraint(value: Any) -> Optional[str]:
    text = str(value).strip() if value is not None else ""
    return None if text.lower() in _ANY else text


@dataclass(frozen=True)
class WorkEntryFilter:
    """Filter applied to enriched work entries before listing or aggregating.

    Empty values and ``"all"`` mean "no constraint". Bounds are inclusive.
    """

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    college_id: Optional[str] = None
    work_type: Optional[str] = None
    status: Optional[str] = None
    search: Optional[str] = None
    min_cost: Optional[float] = None
    max_cost: Optional[float] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "WorkEntryFilter":
        def cost(name: str) -> Optional[float]:
            raw = args.get(name)
            return to_number(raw) if is_numeric(raw) else None

        return cls(
            date_from=optional_date(args.get("date_from"), "Start date"),
            date_to=optional_date(args.get("date_to"), "End date"),
            college_id=_constraint(args.get("college_id")),
            work_type=_constraint(args.get("work_type")),
            status=_constraint(args.get("status")),
            search=_constraint(args.get("search")),
            min_cost=cost("min_cost"),
            max_cost=cost("max_cost"),
        )

    @property
    def is_active(self) -> bool:
        return any(v is not None for v in vars(self).values())


def search_text(row: EnrichedWorkEntry) -> str:
    e = row.entry
    parts = [e.work_description, e.location, e.college_name, e.work_type, e.block, e.work_area_or_room]
    return " ".join(str(p) for p in parts if p).lower()


def matches(row: EnrichedWorkEntry, flt: WorkEntryFilter) -> bool:
    e = row.entry

    if flt.search and flt.search.lower() not in search_text(row):
        return False

    if flt.college_id is not None and str(e.college_id) != str(flt.college_id):
        return False

    if flt.work_type is not None and work_type_key(e.work_type) != work_type_key(flt.work_type):
        return False

    if flt.status is not None and e.status != flt.status:
        return False

    if flt.date_from or flt.date_to:
        entry_date = to_date(e.date)
        if entry_date is None:
            return False
        if flt.date_from and entry_date < flt.date_from:
            return False
        if flt.date_to and entry_date > flt.date_to:
            return False

    if flt.min_cost is not None and row.final_rate < flt.min_cost:
        return False
    if flt.max_cost is not None and row.final_rate > flt.max_cost:
        return False

    return True


def apply_filter(rows: Iterable[EnrichedWorkEntry], flt: Optional[WorkEntryFilter]) -> list[EnrichedWorkEntry]:
    if flt is None:
        return list(rows)
    return [r for r in rows if matches(r, flt)]
