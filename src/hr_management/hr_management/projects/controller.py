from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    @api_errors
    def list_projects():
        return jsonify([p.to_dict() for p in service.list_projects(request.args.get("q", ""))])

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    @api_errors
    def create_project():
        data = json_body()
        project = service.create(
            name=data.get("name", ""),
            end_date=data.get("end_date", ""),
            status=data.get("status"),
            progress=data.get("progress", 0),
            description=data.get("description", ""),
            employee_ids=data.get("employee_ids") or [],
        )
        return jsonify(project.to_dict()), 201

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="get_project")
    @api_errors
    def get_project(project_id: str):
        return jsonify(service.get(project_id).to_dict())

    @app.route("/api/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    @api_errors
    def update_project(project_id: str):
        return jsonify(service.update(project_id, json_body()).to_dict())

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    @api_errors
    def delete_project(project_id: str):
        service.delete(project_id)
        return jsonify({"success": True})

    @app.route("/api/projects/<project_id>/assignments", methods=["PUT"], endpoint="replace_assignments")
    @api_errors
    def replace_assignments(project_id: str):
        service.get(project_id)
        assigned = service.replace_assignments(project_id, json_body().get("employee_ids") or [])
        return jsonify([a.to_dict() for a in assigned])

    @app.route("/api/employees/<employee_id>/projects", methods=["GET"], endpoint="employee_assignments")
    @api_errors
    def employee_assignments(employee_id: str):
        return jsonify([a.to_dict() for a in service.assignments_for_employee(employee_id)])
