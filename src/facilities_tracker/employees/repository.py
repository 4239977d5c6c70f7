from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, data: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, *, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: int) -> bool:
        raise NotImplementedError
