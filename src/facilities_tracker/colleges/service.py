from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import optional_text, require_email, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import College
from .repository import CollegeRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "location", "contact_person", "phone", "email", "address")


class CollegeService:
    def __init__(self, colleges: CollegeRepository):
        self._colleges = colleges

    def list_colleges(self) -> Sequence[College]:
        return self._colleges.list_all()

    def get(self, college_id: int) -> College:
        college = self._colleges.get_by_id(int(college_id))
        if not college:
            raise NotFoundError(f"College {college_id} does not exist")
        return college

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        out: dict = {}
        for field in EDITABLE_FIELDS:
            if partial and field not in data:
                continue
            out[field] = optional_text(data.get(field))

        if not partial or "name" in out:
            out["name"] = require_non_empty(out.get("name"), "College name")
        if out.get("email"):
            out["email"] = require_email(out["email"])
        return out

    def create(self, data: Mapping[str, Any]) -> int:
        clean = self._clean(data, partial=False)
        college_id = self._colleges.create(data=clean)
        logger.info("Created college %s (%s)", college_id, clean["name"])
        return college_id

    def update(self, college_id: int, changes: Mapping[str, Any]) -> None:
        self.get(college_id)
        clean = self._clean(changes, partial=True)
        if not clean:
            raise ValidationError("No changes supplied")
        self._colleges.update(int(college_id), changes=clean)
        logger.info("Updated college %s fields=%s", college_id, sorted(clean))

    def delete(self, college_id: int) -> None:
        # Work entries are left in place; they show up as orphaned afterwards.
        if not self._colleges.delete(int(college_id)):
            raise NotFoundError(f"College {college_id} does not exist")
        logger.info("Deleted college %s", college_id)
