from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Iterable, Mapping, Optional

from ..colleges.repository import CollegeRepository
from ..common.datetime_utils import now_local, to_date
from ..common.numbers import parse_number
from ..common.validators import optional_non_negative, optional_text, require_choice, require_non_empty
from ..core.enums import QualityIssue, WorkStatus
from ..core.exceptions import NotFoundError, ValidationError
from .calculator.base import MetricsCalculator
from .filters import WorkEntryFilter, apply_filter
from .model import EnrichedWorkEntry, WorkEntryMetrics
from .quality import DataQualityReport, analyze_entries
from .repository import WorkEntryRepository

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("location", "block", "floor", "work_area_or_room", "work_description", "work_type")
NUMBER_FIELDS = ("length", "width", "height", "square_feet", "rate_per_sqft", "final_rate")
EDITABLE_FIELDS = ("college_id", "date", "quantity", "status") + TEXT_FIELDS + NUMBER_FIELDS
REQUIRED_TEXT = {"location": "Location", "work_description": "Work description"}


@dataclass(frozen=True)
class TableTotals:
    count: int
    total_square_feet: float
    total_amount: float


def table_totals(rows: Iterable[EnrichedWorkEntry]) -> TableTotals:
    count = 0
    sqft = 0.0
    amount = 0.0
    for r in rows:
        count += 1
        sqft += r.square_feet
        amount += r.final_rate
    return TableTotals(count=count, total_square_feet=sqft, total_amount=amount)


def _quantity(value: Any) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 1
    num = parse_number(value)
    if num is None:
        raise ValidationError("Quantity must be a whole number")
    qty = int(num)
    return qty if qty > 0 else 1


class WorkEntryService:
    def __init__(
        self,
        entries: WorkEntryRepository,
        colleges: CollegeRepository,
        calculator: MetricsCalculator,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._entries = entries
        self._colleges = colleges
        self._calculator = calculator
        self._clock = clock

    @property
    def calculator(self) -> MetricsCalculator:
        return self._calculator

    def list_entries(self, flt: Optional[WorkEntryFilter] = None) -> list[EnrichedWorkEntry]:
        rows = self._calculator.enrich(self._entries.list_all())
        return apply_filter(rows, flt)

    def get(self, entry_id: int) -> EnrichedWorkEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError(f"Work entry {entry_id} does not exist")
        return EnrichedWorkEntry(entry=entry, metrics=self._calculator.for_entry(entry))

    def preview(self, fields: Mapping[str, Any]) -> WorkEntryMetrics:
        return self._calculator.for_fields(fields)

    def _college_id(self, value: Any) -> int:
        try:
            college_id = int(str(value).strip())
        except (TypeError, ValueError):
            raise ValidationError("College is required")
        if not self._colleges.get_by_id(college_id):
            raise ValidationError(f"College {college_id} does not exist")
        return college_id

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        out: dict = {}

        for field in TEXT_FIELDS:
            if partial and field not in data:
                continue
            if field in REQUIRED_TEXT:
                out[field] = require_non_empty(data.get(field), REQUIRED_TEXT[field])
            elif field == "work_type":
                out[field] = optional_text(data.get(field)) or ""
            else:
                out[field] = optional_text(data.get(field))

        for field in NUMBER_FIELDS:
            if partial and field not in data:
                continue
            out[field] = optional_non_negative(data.get(field), field.replace("_", " ").capitalize())

        if not partial or "college_id" in data:
            out["college_id"] = self._college_id(data.get("college_id"))

        if not partial or "quantity" in data:
            out["quantity"] = _quantity(data.get("quantity"))

        if not partial or "status" in data:
            raw_status = data.get("status") or WorkStatus.PENDING.value
            out["status"] = require_choice(raw_status, WorkStatus, "Status").value

        if not partial or "date" in data:
            raw_date = data.get("date")
            if raw_date in (None, "") and not partial:
                out["date"] = self._today()
            else:
                parsed = to_date(raw_date)
                if parsed is None:
                    raise ValidationError("Date must be YYYY-MM-DD")
                out["date"] = parsed

        return out

    def _today(self) -> date:
        return self._clock().date()

    def create(self, data: Mapping[str, Any]) -> int:
        clean = self._clean(data, partial=False)
        entry_id = self._entries.create(data=clean)
        logger.info("Created work entry %s for college %s", entry_id, clean["college_id"])
        return entry_id

    def update(self, entry_id: int, changes: Mapping[str, Any]) -> None:
        if not self._entries.get_by_id(int(entry_id)):
            raise NotFoundError(f"Work entry {entry_id} does not exist")
        editable = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        if not editable:
            raise ValidationError("No changes supplied")
        clean = self._clean(editable, partial=True)
        self._entries.update(int(entry_id), changes=clean)
        logger.info("Updated work entry %s fields=%s", entry_id, sorted(clean))

    def delete(self, entry_id: int) -> None:
        if not self._entries.delete(int(entry_id)):
            raise NotFoundError(f"Work entry {entry_id} does not exist")
        logger.info("Deleted work entry %s", entry_id)

    def quality_report(self) -> DataQualityReport:
        return analyze_entries(list(self._entries.list_all()), list(self._colleges.list_all()))

    def purge(self, issue: QualityIssue | str) -> int:
        issue = QualityIssue(issue)
        targets = self.quality_report().entries_for(issue)
        removed = 0
        for entry in targets:
            if self._entries.delete(entry.entry_id):
                removed += 1
        logger.warning("Purged %s %s work entries", removed, issue.value)
        return removed
