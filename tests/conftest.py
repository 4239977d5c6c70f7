from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; the week window starts on Sunday 2026-02-15.
    return datetime(2026, 2, 18, 9, 0, 0)
