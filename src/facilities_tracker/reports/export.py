"""Tabular rows for spreadsheet export and the writers that serialise them.

Row builders return plain dicts; key insertion order is the column order.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..colleges.model import College
from ..common.datetime_utils import to_date
from ..common.numbers import positive_or, to_number
from ..work_entries.model import EnrichedWorkEntry

NA = "N/A"


def _fmt_date(value) -> str:
    d = to_date(value)
    return d.strftime("%Y-%m-%d") if d else NA


def work_entry_rows(rows: Sequence[EnrichedWorkEntry]) -> list[dict]:
    out = []
    for index, r in enumerate(rows, start=1):
        e = r.entry
        out.append(
            {
                "S.No": index,
                "Date": _fmt_date(e.date),
                "College": e.college_name or NA,
                "Location": e.location or NA,
                "Blocks": e.block or "",
                "Work Area/Room": e.work_area_or_room or "",
                "Work Description": e.work_description or NA,
                "Work Type": e.work_type or NA,
                "Length (ft)": to_number(e.length),
                "Width (ft)": to_number(e.width),
                "Height (ft)": to_number(e.height),
                "Quantity": int(positive_or(e.quantity, 1)),
                "Sq.Ft (Volume)": r.square_feet,
                "Rate per Unit": r.rate_per_sqft,
                "Final Rate": r.final_rate,
                "Status": e.status or NA,
            }
        )
    return out


def attendance_rows(records: Iterable[AttendanceRecord]) -> list[dict]:
    return [
        {
            "Date": _fmt_date(r.date),
            "Employee Name": r.employee_name or NA,
            "Employee Email": r.employee_email or NA,
            "Employee Role": r.employee_role or NA,
            "Employee Department": r.employee_department or NA,
            "Check In Time": r.check_in or NA,
            "Check Out Time": r.check_out or NA,
            "Total Hours": to_number(r.total_hours),
            "Status": r.status,
            "Work Description": r.work_description or NA,
            "Overtime Hours": to_number(r.overtime),
        }
        for r in records
    ]


def college_rows(colleges: Iterable[College]) -> list[dict]:
    return [
        {
            "College Name": c.name,
            "Location": c.location or NA,
            "Contact Person": c.contact_person or NA,
            "Phone": c.phone or NA,
            "Email": c.email or NA,
            "Address": c.address or NA,
        }
        for c in colleges
    ]


def to_xlsx_bytes(rows: Sequence[dict], *, sheet_name: str) -> bytes:
    df = pd.DataFrame(rows)

    # Write to an in-memory workbook (nothing touches the disk).
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
        sheet = writer.sheets[sheet_name]
        for idx, column in enumerate(df.columns, start=1):
            sheet.column_dimensions[sheet.cell(row=1, column=idx).column_letter].width = max(len(str(column)), 15)
    return output.getvalue()


def to_csv_bytes(rows: Sequence[dict]) -> bytes:
    out = io.StringIO()
    if rows:
        writer = csv.DictWriter(out, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
