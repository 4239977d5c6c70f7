"""Data-quality checks over the work entry collection.

Each check is a pure function over the entries (and colleges, for orphans);
nothing here deletes anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..colleges.model import College
from ..common.numbers import to_number
from ..core.constants import TEST_ENTRY_KEYWORDS
from ..core.enums import QualityIssue
from .model import WorkEntry


@dataclass(frozen=True)
class DataQualityReport:
    duplicates: list[WorkEntry] = field(default_factory=list)
    incomplete: list[WorkEntry] = field(default_factory=list)
    test_entries: list[WorkEntry] = field(default_factory=list)
    orphaned: list[WorkEntry] = field(default_factory=list)

    def entries_for(self, issue: QualityIssue) -> list[WorkEntry]:
        return {
            QualityIssue.DUPLICATE: self.duplicates,
            QualityIssue.INCOMPLETE: self.incomplete,
            QualityIssue.TEST: self.test_entries,
            QualityIssue.ORPHANED: self.orphaned,
        }[issue]

    def counts(self) -> dict[str, int]:
        return {issue.value: len(self.entries_for(issue)) for issue in QualityIssue}


def _duplicate_key(e: WorkEntry) -> tuple:
    return (
        str(e.college_id),
        e.location,
        e.work_description,
        str(e.date),
        e.block or "",
        e.floor or "",
        e.work_area_or_room or "",
    )


def find_duplicates(entries: Iterable[WorkEntry]) -> list[WorkEntry]:
    """Every occurrence after the first of the same college/location/description/date/place."""
    seen: set[tuple] = set()
    duplicates: list[WorkEntry] = []
    for e in entries:
        key = _duplicate_key(e)
        if key in seen:
            duplicates.append(e)
        else:
            seen.add(key)
    return duplicates


def find_incomplete(entries: Iterable[WorkEntry]) -> list[WorkEntry]:
    return [
        e
        for e in entries
        if not e.college_id
        or not e.location
        or not e.work_description
        or not e.work_type
        or not e.date
        or to_number(e.quantity) <= 0
    ]


def find_test_entries(entries: Iterable[WorkEntry]) -> list[WorkEntry]:
    def looks_like_test(e: WorkEntry) -> bool:
        text = " ".join(
            (p or "").lower() for p in (e.work_description, e.location, e.block, e.floor, e.work_area_or_room)
        )
        return any(keyword in text for keyword in TEST_ENTRY_KEYWORDS)

    return [e for e in entries if looks_like_test(e)]


def find_orphaned(entries: Iterable[WorkEntry], colleges: Iterable[College]) -> list[WorkEntry]:
    """Entries whose college reference does not match any known college."""
    known = {str(c.college_id) for c in colleges}
    return [e for e in entries if str(e.college_id) not in known]


def analyze_entries(entries: Sequence[WorkEntry], colleges: Sequence[College]) -> DataQualityReport:
    return DataQualityReport(
        duplicates=find_duplicates(entries),
        incomplete=find_incomplete(entries),
        test_entries=find_test_entries(entries),
        orphaned=find_orphaned(entries, colleges),
    )
