from __future__ import annotations

import io
from datetime import date

import pandas as pd

from facilities_tracker.attendance.model import AttendanceRecord
from facilities_tracker.colleges.model import College
from facilities_tracker.reports.export import (
    attendance_rows,
    college_rows,
    to_csv_bytes,
    to_xlsx_bytes,
    work_entry_rows,
)
from facilities_tracker.work_entries.calculator.standard_calculator import StandardMetricsCalculator
from facilities_tracker.work_entries.model import WorkEntry

WORK_ENTRY_COLUMNS = [
    "S.No",
    "Date",
    "College",
    "Location",
    "Blocks",
    "Work Area/Room",
    "Work Description",
    "Work Type",
    "Length (ft)",
    "Width (ft)",
    "Height (ft)",
    "Quantity",
    "Sq.Ft (Volume)",
    "Rate per Unit",
    "Final Rate",
    "Status",
]


def _rows():
    entries = [
        WorkEntry(
            entry_id=7,
            college_id=1,
            location="Library",
            work_description="Repaint",
            work_type="painting",
            date=date(2026, 2, 1),
            length=10,
            width=5,
            quantity=3,
            college_name="North",
        ),
        WorkEntry(
            entry_id=8,
            college_id=1,
            location="Lab",
            work_description="Rewire",
            work_type="electrical",
            date=None,
        ),
    ]
    return StandardMetricsCalculator().enrich(entries)


def test_work_entry_rows_use_shared_metrics_and_real_quantity():
    rows = work_entry_rows(_rows())

    assert list(rows[0]) == WORK_ENTRY_COLUMNS
    assert rows[0]["S.No"] == 1
    assert rows[0]["Date"] == "2026-02-01"
    assert rows[0]["Quantity"] == 3
    assert rows[0]["Sq.Ft (Volume)"] == 150
    assert rows[0]["Final Rate"] == 1800
    assert rows[1]["Date"] == "N/A"
    assert rows[1]["College"] == "N/A"
    assert rows[1]["Quantity"] == 1


def test_attendance_and_college_rows():
    record = AttendanceRecord(
        attendance_id=1,
        employee_id=2,
        date="2026-02-02",
        check_in="09:00",
        check_out="17:30",
        total_hours=8.5,
        employee_name="Asha",
    )
    [row] = attendance_rows([record])
    assert row["Employee Name"] == "Asha"
    assert row["Employee Email"] == "N/A"
    assert row["Total Hours"] == 8.5
    assert row["Overtime Hours"] == 0

    [college] = college_rows([College(college_id=1, name="North", phone="123")])
    assert list(college) == ["College Name", "Location", "Contact Person", "Phone", "Email", "Address"]
    assert college["Phone"] == "123"


def test_csv_has_bom_and_header():
    data = to_csv_bytes(work_entry_rows(_rows()))
    text = data.decode("utf-8-sig")

    assert data.startswith(b"\xef\xbb\xbf")
    assert text.splitlines()[0].split(",")[:3] == ["S.No", "Date", "College"]
    assert to_csv_bytes([]) == "".encode("utf-8-sig")


def test_xlsx_round_trips_through_pandas():
    data = to_xlsx_bytes(work_entry_rows(_rows()), sheet_name="Work Entries")
    df = pd.read_excel(io.BytesIO(data), sheet_name="Work Entries", engine="openpyxl")

    assert list(df.columns) == WORK_ENTRY_COLUMNS
    assert len(df) == 2
