from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_errors
    def list_employees():
        return ok(
            svc.list_employees(
                search=request.args.get("search"),
                role=request.args.get("role"),
                status=request.args.get("status"),
            )
        )

    @app.route("/api/employees/summary", methods=["GET"], endpoint="employee_summary")
    @api_errors
    def employee_summary():
        return ok(svc.summary())

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_errors
    def create_employee():
        employee_id = svc.create(request_data())
        return ok(svc.get(employee_id), 201)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @api_errors
    def get_employee(employee_id: int):
        return ok(svc.get(employee_id))

    @app.route("/api/employees/<int:employee_id>", methods=["PATCH", "PUT"], endpoint="update_employee")
    @api_errors
    def update_employee(employee_id: int):
        svc.update(employee_id, request_data())
        return ok(svc.get(employee_id))

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_errors
    def delete_employee(employee_id: int):
        svc.delete(employee_id)
        return ok()
