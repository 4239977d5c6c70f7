from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        """All records joined with employee details, newest date first."""
        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, data: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, attendance_id: int, *, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError
