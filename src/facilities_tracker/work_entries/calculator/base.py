from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from ...common.numbers import is_numeric, positive_or, to_number
from ...core.constants import DEFAULT_RATES
from ..model import EnrichedWorkEntry, NumberLike, WorkEntry, WorkEntryMetrics


def work_type_key(work_type: Optional[str]) -> str:
    return work_type.strip().lower() if work_type else ""


class MetricsCalculator(ABC):
    """Derive square footage, rate and final cost for one work entry.

    Fallback order for every output: explicit stored value, then geometry
    (or the rate table), then zero. Subclasses only decide whether height
    takes part in the area.
    """

    def __init__(self, rates: Optional[Mapping[str, float]] = None):
        source = DEFAULT_RATES if rates is None else rates
        self._rates = {work_type_key(k): to_number(v) for k, v in source.items()}

    @abstractmethod
    def height_factor(self, work_type_key: str, height: NumberLike) -> float:
        raise NotImplementedError

    def default_rate(self, work_type: Optional[str]) -> float:
        return self._rates.get(work_type_key(work_type), 0.0)

    def square_feet(
        self,
        *,
        length: NumberLike,
        width: NumberLike,
        height: NumberLike = None,
        quantity: NumberLike = None,
        work_type: Optional[str] = None,
        square_feet: NumberLike = None,
    ) -> float:
        if is_numeric(square_feet):
            return to_number(square_feet)
        area = (
            to_number(length)
            * to_number(width)
            * self.height_factor(work_type_key(work_type), height)
            * positive_or(quantity, 1.0)
        )
        return area if math.isfinite(area) else 0.0

    def calculate(
        self,
        *,
        length: NumberLike = None,
        width: NumberLike = None,
        height: NumberLike = None,
        quantity: NumberLike = None,
        work_type: Optional[str] = None,
        square_feet: NumberLike = None,
        rate_per_sqft: NumberLike = None,
        final_rate: NumberLike = None,
    ) -> WorkEntryMetrics:
        sqft = self.square_feet(
            length=length,
            width=width,
            height=height,
            quantity=quantity,
            work_type=work_type,
            square_feet=square_feet,
        )
        rate = to_number(rate_per_sqft) or self.default_rate(work_type)
        final = to_number(final_rate) or sqft * rate
        if not math.isfinite(final):
            final = 0.0
        return WorkEntryMetrics(square_feet=sqft, rate_per_sqft=rate, final_rate=final)

    def for_entry(self, entry: WorkEntry) -> WorkEntryMetrics:
        return self.calculate(
            length=entry.length,
            width=entry.width,
            height=entry.height,
            quantity=entry.quantity,
            work_type=entry.work_type,
            square_feet=entry.square_feet,
            rate_per_sqft=entry.rate_per_sqft,
            final_rate=entry.final_rate,
        )

    def for_fields(self, fields: Mapping[str, Any]) -> WorkEntryMetrics:
        """Form preview: raw string fields straight from the request."""
        return self.calculate(
            length=fields.get("length"),
            width=fields.get("width"),
            height=fields.get("height"),
            quantity=fields.get("quantity"),
            work_type=fields.get("work_type"),
            square_feet=fields.get("square_feet"),
            rate_per_sqft=fields.get("rate_per_sqft"),
            final_rate=fields.get("final_rate"),
        )

    def enrich(self, entries: Iterable[WorkEntry]) -> list[EnrichedWorkEntry]:
        return [EnrichedWorkEntry(entry=e, metrics=self.for_entry(e)) for e in entries]
