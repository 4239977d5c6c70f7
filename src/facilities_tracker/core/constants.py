"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Default auto-rates per square foot, keyed by lowercase work type.
DEFAULT_RATES = {
    "painting": 12,
    "electrical": 20,
    "plumbing": 15,
    "carpentry": 18,
    "masonry": 25,
    "cleaning": 10,
    "maintenance": 14,
    "renovation": 30,
}

VOLUME_WORK_TYPES = frozenset({"masonry", "plumbing"})

SMALL_PROJECT_MAX_SQFT = 100
LARGE_PROJECT_MIN_SQFT = 500

EMPLOYEE_ESTIMATE_DIVISOR = 5
DEFAULT_TREND_MONTHS = 6

TEST_ENTRY_KEYWORDS = ("test", "demo", "sample", "dummy", "temp", "trial")
