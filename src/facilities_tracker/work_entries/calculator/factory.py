from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ...core.enums import HeightPolicy
from .base import MetricsCalculator
from .standard_calculator import StandardMetricsCalculator
from .volume_calculator import VolumeTypeMetricsCalculator


def build_calculator(
    policy: HeightPolicy | str = HeightPolicy.ALWAYS,
    *,
    rates: Optional[Mapping[str, float]] = None,
    volume_types: Optional[Iterable[str]] = None,
) -> MetricsCalculator:
    """Factory Pattern: choose the calculator for the configured height policy."""
    if HeightPolicy(policy) == HeightPolicy.VOLUME_ONLY:
        return VolumeTypeMetricsCalculator(rates, volume_types=volume_types)
    return StandardMetricsCalculator(rates)
