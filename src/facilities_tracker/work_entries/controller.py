from __future__ import annotations

import io
from datetime import date

from flask import Flask, request, send_file

from ..common.http import api_errors, fail, ok, request_data
from ..container import Container
from ..core.enums import QualityIssue
from ..reports.export import to_csv_bytes, to_xlsx_bytes
from .filters import WorkEntryFilter
from .service import table_totals

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    svc = container.work_entry_service

    def _export_name(ext: str) -> str:
        return f"work_entries_{date.today().strftime('%Y%m%d')}.{ext}"

    @app.route("/api/work-entries", methods=["GET"], endpoint="list_work_entries")
    @api_errors
    def list_work_entries():
        rows = svc.list_entries(WorkEntryFilter.from_args(request.args))
        return ok({"entries": rows, "totals": table_totals(rows)})

    @app.route("/api/work-entries", methods=["POST"], endpoint="create_work_entry")
    @api_errors
    def create_work_entry():
        entry_id = svc.create(request_data())
        return ok(svc.get(entry_id), 201)

    @app.route("/api/work-entries/preview", methods=["POST"], endpoint="preview_work_entry")
    @api_errors
    def preview_work_entry():
        return ok(svc.preview(request_data()))

    @app.route("/api/work-entries/<int:entry_id>", methods=["GET"], endpoint="get_work_entry")
    @api_errors
    def get_work_entry(entry_id: int):
        return ok(svc.get(entry_id))

    @app.route("/api/work-entries/<int:entry_id>", methods=["PATCH", "PUT"], endpoint="update_work_entry")
    @api_errors
    def update_work_entry(entry_id: int):
        svc.update(entry_id, request_data())
        return ok(svc.get(entry_id))

    @app.route("/api/work-entries/<int:entry_id>", methods=["DELETE"], endpoint="delete_work_entry")
    @api_errors
    def delete_work_entry(entry_id: int):
        svc.delete(entry_id)
        return ok()

    @app.route("/api/work-entries/quality", methods=["GET"], endpoint="work_entry_quality")
    @api_errors
    def work_entry_quality():
        report = svc.quality_report()
        return ok({"counts": report.counts(), "report": report})

    @app.route("/api/work-entries/quality/<kind>/purge", methods=["POST"], endpoint="purge_work_entries")
    @api_errors
    def purge_work_entries(kind: str):
        try:
            issue = QualityIssue(kind)
        except ValueError:
            return fail(f"Unknown cleanup type: {kind}", 400)
        return ok({"deleted": svc.purge(issue)})

    @app.route("/api/work-entries/export.xlsx", methods=["GET"], endpoint="export_work_entries_xlsx")
    @api_errors
    def export_work_entries_xlsx():
        rows = container.report_service.work_entry_export(WorkEntryFilter.from_args(request.args))
        if not rows:
            return fail("Nothing to export", 404)
        return send_file(
            io.BytesIO(to_xlsx_bytes(rows, sheet_name="Work Entries")),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=_export_name("xlsx"),
        )

    @app.route("/api/work-entries/export.csv", methods=["GET"], endpoint="export_work_entries_csv")
    @api_errors
    def export_work_entries_csv():
        rows = container.report_service.work_entry_export(WorkEntryFilter.from_args(request.args))
        return app.response_class(
            to_csv_bytes(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_export_name('csv')}"},
        )
