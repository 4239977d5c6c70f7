from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import to_date
from ..common.numbers import safe_percentage, safe_ratio, to_number
from ..common.validators import optional_non_negative, optional_text, parse_hhmm, require_choice
from ..core.enums import AttendanceStatus, CheckInFilter
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .hours import worked_hours
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "employee_id",
    "date",
    "check_in",
    "check_out",
    "total_hours",
    "status",
    "work_description",
    "overtime",
    "notes",
)


def _matches_check_in(r: AttendanceRecord, check_in: CheckInFilter) -> bool:
    if check_in == CheckInFilter.CHECKED_IN:
        return bool(r.check_in)
    if check_in == CheckInFilter.NOT_CHECKED_IN:
        return not r.check_in
    if check_in == CheckInFilter.CHECKED_OUT:
        return bool(r.check_out)
    return not r.check_out


def filter_records(
    records: Iterable[AttendanceRecord],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
    employee_id: Optional[int | str] = None,
    check_in: Optional[CheckInFilter | str] = None,
) -> list[AttendanceRecord]:
    needle = (search or "").strip().lower()
    status = None if status in (None, "", "all") else status
    employee_id = None if employee_id in (None, "", "all") else str(employee_id).strip()
    check_in = None if check_in in (None, "", "all") else require_choice(check_in, CheckInFilter, "Check-in filter")

    out = []
    for r in records:
        if start or end:
            d = to_date(r.date)
            if d is None or (start and d < start) or (end and d > end):
                continue
        if status and r.status != status:
            continue
        if employee_id is not None and str(r.employee_id) != employee_id:
            continue
        if check_in is not None and not _matches_check_in(r, check_in):
            continue
        if needle:
            haystack = " ".join(v for v in (r.employee_name, r.employee_email, r.work_description) if v).lower()
            if needle not in haystack:
                continue
        out.append(r)
    return out


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    items = list(records)

    def count(status: AttendanceStatus) -> int:
        return sum(1 for r in items if r.status == status.value)

    hours = [to_number(r.total_hours) for r in items]
    worked_days = sum(1 for h in hours if h > 0)
    total_hours = sum(hours)
    absent = count(AttendanceStatus.ABSENT)

    return AttendanceSummary(
        records=len(items),
        present=count(AttendanceStatus.PRESENT),
        absent=absent,
        late=count(AttendanceStatus.LATE),
        half_day=count(AttendanceStatus.HALF_DAY),
        total_hours=round(total_hours, 2),
        average_hours=round(safe_ratio(total_hours, worked_days), 2),
        overtime_hours=round(sum(to_number(r.overtime) for r in items), 2),
        absence_rate=round(safe_percentage(absent, len(items)), 2),
    )


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def list_records(
        self, *, start=None, end=None, status=None, search=None, employee_id=None, check_in=None
    ) -> list[AttendanceRecord]:
        return filter_records(
            self._attendance.list_all(),
            start=start,
            end=end,
            status=status,
            search=search,
            employee_id=employee_id,
            check_in=check_in,
        )

    def get(self, attendance_id: int) -> AttendanceRecord:
        rec = self._attendance.get_by_id(int(attendance_id))
        if not rec:
            raise NotFoundError(f"Attendance record {attendance_id} does not exist")
        return rec

    def summary(self, *, start: Optional[date] = None, end: Optional[date] = None) -> AttendanceSummary:
        return summarize(self.list_records(start=start, end=end))

    def _employee_id(self, value: Any) -> int:
        try:
            employee_id = int(str(value).strip())
        except (TypeError, ValueError):
            raise ValidationError("Employee is required")
        if not self._employees.get_by_id(employee_id):
            raise ValidationError(f"Employee {employee_id} does not exist")
        return employee_id

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        out: dict = {}

        def wants(field: str) -> bool:
            return not partial or field in data

        if wants("employee_id"):
            out["employee_id"] = self._employee_id(data.get("employee_id"))
        if wants("date"):
            out["date"] = to_date(data.get("date"))
            if out["date"] is None:
                raise ValidationError("Date must be YYYY-MM-DD")
        if wants("check_in"):
            out["check_in"] = parse_hhmm(data.get("check_in"), "Check-in")
        if wants("check_out"):
            out["check_out"] = parse_hhmm(data.get("check_out"), "Check-out")
        if wants("status"):
            out["status"] = require_choice(
                data.get("status") or AttendanceStatus.PRESENT.value, AttendanceStatus, "Status"
            ).value
        if wants("total_hours"):
            out["total_hours"] = optional_non_negative(data.get("total_hours"), "Total hours")
        if wants("overtime"):
            out["overtime"] = optional_non_negative(data.get("overtime"), "Overtime") or 0
        for field in ("work_description", "notes"):
            if wants(field):
                out[field] = optional_text(data.get(field))
        return out

    @staticmethod
    def _resolve_hours(check_in: Optional[str], check_out: Optional[str], supplied: Any) -> float:
        if check_in and check_out:
            return worked_hours(check_in, check_out)
        return to_number(supplied)

    def record(self, data: Mapping[str, Any]) -> int:
        clean = self._clean(data, partial=False)
        clean["total_hours"] = self._resolve_hours(clean["check_in"], clean["check_out"], clean["total_hours"])
        attendance_id = self._attendance.create(data=clean)
        logger.info(
            "Recorded attendance %s for employee %s on %s (%s)",
            attendance_id,
            clean["employee_id"],
            clean["date"],
            clean["status"],
        )
        return attendance_id

    def update(self, attendance_id: int, changes: Mapping[str, Any]) -> None:
        current = self.get(attendance_id)
        editable = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        if not editable:
            raise ValidationError("No changes supplied")
        clean = self._clean(editable, partial=True)

        if {"check_in", "check_out", "total_hours"} & clean.keys():
            check_in = clean.get("check_in", current.check_in)
            check_out = clean.get("check_out", current.check_out)
            supplied = clean.get("total_hours", current.total_hours)
            clean["total_hours"] = self._resolve_hours(check_in, check_out, supplied)

        self._attendance.update(int(attendance_id), changes=clean)
        logger.info("Updated attendance %s fields=%s", attendance_id, sorted(clean))

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.delete(int(attendance_id)):
            raise NotFoundError(f"Attendance record {attendance_id} does not exist")
        logger.info("Deleted attendance %s", attendance_id)
