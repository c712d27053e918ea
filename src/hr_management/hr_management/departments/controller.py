from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @api_errors
    def list_departments():
        return jsonify([d.to_dict() for d in service.list_departments(request.args.get("q", ""))])

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @api_errors
    def create_department():
        return jsonify(service.create(json_body().get("name", "")).to_dict()), 201

    @app.route("/api/departments/<department_id>", methods=["PUT"], endpoint="rename_department")
    @api_errors
    def rename_department(department_id: str):
        return jsonify(service.rename(department_id, json_body().get("name", "")).to_dict())

    @app.route("/api/departments/<department_id>", methods=["DELETE"], endpoint="delete_department")
    @api_errors
    def delete_department(department_id: str):
        service.delete(department_id)
        return jsonify({"success": True})
