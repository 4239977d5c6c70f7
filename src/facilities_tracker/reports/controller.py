from __future__ import annotations

import io
from datetime import date

from flask import Flask, request, send_file

from ..common.http import api_errors, fail, ok
from ..container import Container
from ..work_entries.filters import WorkEntryFilter
from .export import to_xlsx_bytes

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    svc = container.report_service

    @app.route("/api/reports/performance", methods=["GET"], endpoint="report_performance")
    @api_errors
    def report_performance():
        flt = WorkEntryFilter.from_args(request.args)
        return ok(svc.performance(college_id=flt.college_id, flt=flt))

    @app.route("/api/reports/trends", methods=["GET"], endpoint="report_trends")
    @api_errors
    def report_trends():
        return ok(svc.trends(WorkEntryFilter.from_args(request.args)))

    @app.route("/api/reports/summary", methods=["GET"], endpoint="report_summary")
    @api_errors
    def report_summary():
        return ok(svc.summary(WorkEntryFilter.from_args(request.args)))

    @app.route("/api/colleges/export.xlsx", methods=["GET"], endpoint="export_colleges_xlsx")
    @api_errors
    def export_colleges_xlsx():
        rows = svc.college_export()
        if not rows:
            return fail("Nothing to export", 404)
        return send_file(
            io.BytesIO(to_xlsx_bytes(rows, sheet_name="Colleges")),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"colleges_{date.today().strftime('%Y%m%d')}.xlsx",
        )
