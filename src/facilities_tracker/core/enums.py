from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Work entry status. Any transition between values is allowed."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class EmployeeRole(str, Enum):
    WORKER = "worker"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    ADMIN = "admin"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on-leave"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored by the data source."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class HeightPolicy(str, Enum):
    """Which work types multiply area by height."""

    ALWAYS = "always"
    VOLUME_ONLY = "volume_only"


class EmployeeCountPolicy(str, Enum):
    """Where the dashboard employee total comes from."""

    ACTUAL = "actual"
    ESTIMATE = "estimate"


class QualityIssue(str, Enum):
    DUPLICATE = "duplicate"
    INCOMPLETE = "incomplete"
    TEST = "test"
    ORPHANED = "orphaned"


class CheckInFilter(str, Enum):
    """Attendance list filter on whether check-in/check-out times are recorded."""

    CHECKED_IN = "checked-in"
    NOT_CHECKED_IN = "not-checked-in"
    CHECKED_OUT = "checked-out"
    NOT_CHECKED_OUT = "not-checked-out"
