from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import College


class CollegeRepository(Protocol):
    def list_all(self) -> Sequence[College]:
        raise NotImplementedError

    def get_by_id(self, college_id: int) -> Optional[College]:
        raise NotImplementedError

    def create(self, *, data: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, college_id: int, *, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, college_id: int) -> bool:
        raise NotImplementedError
