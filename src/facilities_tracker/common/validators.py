from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import to_date
from .numbers import parse_number

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    text = str(value).strip() if value is not None else ""
    return text or None


def require_non_negative(value: Any, field_name: str) -> float:
    # Parsed like the metrics preview: thousands separators allowed, NaN/inf rejected.
    num = parse_number(value)
    if num is None:
        raise ValidationError(f"{field_name} must be a number")
    if num < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return num


def optional_non_negative(value: Any, field_name: str) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_non_negative(value, field_name)


def require_email(value: Optional[str]) -> str:
    email = require_non_empty(value, "Email").lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError("Email is not valid")
    return email


def parse_hhmm(value: Optional[str], field_name: str) -> Optional[str]:
    """Validate an optional HH:MM string and return it normalised."""
    v = str(value).strip() if value is not None else ""
    if not v:
        return None
    try:
        parsed: time = datetime.strptime(v[:5], "%H:%M").time()
    except ValueError:
        raise ValidationError(f"{field_name} must be HH:MM")
    return parsed.strftime("%H:%M")


def require_choice(value: Any, enum_cls, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def optional_date(value: Any, field_name: str) -> Optional[date]:
    """``None`` when empty; a ``ValidationError`` when present but not YYYY-MM-DD."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = to_date(value)
    if parsed is None:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")
    return parsed
