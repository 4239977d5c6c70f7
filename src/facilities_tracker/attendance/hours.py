from __future__ import annotations

from typing import Optional


def _clock_hours(value: str) -> Optional[float]:
    parts = value.strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return None
    return hours + minutes / 60


def worked_hours(check_in: Optional[str], check_out: Optional[str]) -> float:
    """Hours between two HH:MM strings, never negative; 0 when either is missing."""
    if not check_in or not check_out:
        return 0.0
    start = _clock_hours(check_in)
    end = _clock_hours(check_out)
    if start is None or end is None:
        return 0.0
    return round(max(0.0, end - start), 2)
