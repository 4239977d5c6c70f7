from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ...common.numbers import positive_or
from ...core.constants import VOLUME_WORK_TYPES
from ..model import NumberLike
from .base import MetricsCalculator, work_type_key


class VolumeTypeMetricsCalculator(MetricsCalculator):
    """Height only counts for volume-type work (masonry, plumbing, ...)."""

    def __init__(
        self,
        rates: Optional[Mapping[str, float]] = None,
        *,
        volume_types: Optional[Iterable[str]] = None,
    ):
        super().__init__(rates)
        types = VOLUME_WORK_TYPES if volume_types is None else volume_types
        self._volume_types = frozenset(work_type_key(t) for t in types)

    def height_factor(self, work_type_key: str, height: NumberLike) -> float:
        if work_type_key not in self._volume_types:
            return 1.0
        return positive_or(height, 1.0)
