from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, ok
from ..container import Container
from ..work_entries.filters import WorkEntryFilter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard_stats")
    @api_errors
    def dashboard_stats():
        flt = WorkEntryFilter.from_args(request.args)
        return ok(container.dashboard_service.stats(flt))
