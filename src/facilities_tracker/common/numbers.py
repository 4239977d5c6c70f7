from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """Finite float from a number or numeric string, else ``None``.

    Strings may carry thousands separators and spaces ("1,250.5" -> 1250.5).
    Booleans, NaN and infinity are not numbers here. Negative values pass.
    """

    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, (int, float, Decimal)):
            num = float(value)
        elif isinstance(value, str):
            cleaned = value.replace(",", "").replace(" ", "")
            if not cleaned:
                return None
            num = float(cleaned)
        else:
            return None
    except (ValueError, OverflowError):
        return None

    return num if math.isfinite(num) else None


def to_number(value: Any) -> float:
    """Coerce a loosely typed field value into a finite, non-negative float.

    Anything :func:`parse_number` rejects, and negative values, become ``0.0``.
    """

    num = parse_number(value)
    if num is None or num < 0:
        return 0.0
    return num


def positive_or(value: Any, default: float) -> float:
    num = to_number(value)
    return num if num > 0 else default


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0 when the denominator is zero."""
    if not denominator:
        return 0.0
    result = numerator / denominator
    return result if math.isfinite(result) else 0.0


def safe_percentage(part: float, whole: float) -> float:
    return safe_ratio(part, whole) * 100


def is_numeric(value: Any) -> bool:
    return parse_number(value) is not None
