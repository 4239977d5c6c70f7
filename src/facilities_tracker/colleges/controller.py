from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.college_service

    @app.route("/api/colleges", methods=["GET"], endpoint="list_colleges")
    @api_errors
    def list_colleges():
        return ok(svc.list_colleges())

    @app.route("/api/colleges", methods=["POST"], endpoint="create_college")
    @api_errors
    def create_college():
        college_id = svc.create(request_data())
        return ok({"college_id": college_id}, 201)

    @app.route("/api/colleges/<int:college_id>", methods=["GET"], endpoint="get_college")
    @api_errors
    def get_college(college_id: int):
        return ok(svc.get(college_id))

    @app.route("/api/colleges/<int:college_id>", methods=["PATCH", "PUT"], endpoint="update_college")
    @api_errors
    def update_college(college_id: int):
        svc.update(college_id, request_data())
        return ok(svc.get(college_id))

    @app.route("/api/colleges/<int:college_id>", methods=["DELETE"], endpoint="delete_college")
    @api_errors
    def delete_college(college_id: int):
        svc.delete(college_id)
        return ok()
