from __future__ import annotations

from ...common.numbers import positive_or
from ..model import NumberLike
from .base import MetricsCalculator


class StandardMetricsCalculator(MetricsCalculator):
    """Height multiplies the area for every work type when it is positive."""

    def height_factor(self, work_type_key: str, height: NumberLike) -> float:
        return positive_or(height, 1.0)
