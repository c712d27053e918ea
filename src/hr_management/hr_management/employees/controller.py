from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_errors
    def list_employees():
        employees = service.search(request.args.get("q", ""))
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_errors
    def create_employee():
        data = json_body()
        employee = service.create(
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            email=data.get("email", ""),
            department=data.get("department"),
            position=data.get("position", ""),
            status=data.get("status"),
            hire_date=data.get("hire_date"),
        )
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @api_errors
    def get_employee(employee_id: str):
        return jsonify(service.get(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @api_errors
    def update_employee(employee_id: str):
        return jsonify(service.update(employee_id, json_body()).to_dict())

    @app.route("/api/employees/<employee_id>/status", methods=["PATCH"], endpoint="set_employee_status")
    @api_errors
    def set_employee_status(employee_id: str):
        return jsonify(service.set_status(employee_id, json_body().get("status", "")).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_errors
    def delete_employee(employee_id: str):
        service.delete(employee_id)
        return jsonify({"success": True})
