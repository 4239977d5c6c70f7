from __future__ import annotations

import io
from datetime import date

from flask import Flask, request, send_file

from ..common.validators import optional_date
from ..common.http import api_errors, fail, ok, request_data
from ..container import Container
from ..reports.export import to_xlsx_bytes

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    def _range():
        return (
            optional_date(request.args.get("start"), "Start date"),
            optional_date(request.args.get("end"), "End date"),
        )

    def _filters() -> dict:
        start, end = _range()
        return {
            "start": start,
            "end": end,
            "status": request.args.get("status"),
            "search": request.args.get("search"),
            "employee_id": request.args.get("employee_id"),
            "check_in": request.args.get("check_in"),
        }

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @api_errors
    def list_attendance():
        return ok(svc.list_records(**_filters()))

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @api_errors
    def attendance_summary():
        start, end = _range()
        return ok(svc.summary(start=start, end=end))

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @api_errors
    def record_attendance():
        attendance_id = svc.record(request_data())
        return ok(svc.get(attendance_id), 201)

    @app.route("/api/attendance/<int:attendance_id>", methods=["PATCH", "PUT"], endpoint="update_attendance")
    @api_errors
    def update_attendance(attendance_id: int):
        svc.update(attendance_id, request_data())
        return ok(svc.get(attendance_id))

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    @api_errors
    def delete_attendance(attendance_id: int):
        svc.delete(attendance_id)
        return ok()

    @app.route("/api/attendance/export.xlsx", methods=["GET"], endpoint="export_attendance_xlsx")
    @api_errors
    def export_attendance_xlsx():
        rows = container.report_service.attendance_export(**_filters())
        if not rows:
            return fail("Nothing to export", 404)
        return send_file(
            io.BytesIO(to_xlsx_bytes(rows, sheet_name="Attendance Records")),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"attendance_{date.today().strftime('%Y%m%d')}.xlsx",
        )
