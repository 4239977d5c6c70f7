from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import WorkEntry


class WorkEntryRepository(Protocol):
    def list_all(self) -> Sequence[WorkEntry]:
        """All entries joined with college name/location, newest first."""
        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[WorkEntry]:
        raise NotImplementedError

    def create(self, *, data: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, entry_id: int, *, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError
