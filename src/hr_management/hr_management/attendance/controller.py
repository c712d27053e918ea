from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @api_errors
    def attendance_today():
        rows = service.today_overview()
        return jsonify([{"employee": e.to_dict(), "attendance": t.to_dict()} for e, t in rows])

    @app.route("/api/attendance/<employee_id>/toggle", methods=["POST"], endpoint="attendance_toggle")
    @api_errors
    def attendance_toggle(employee_id: str):
        today = service.toggle(employee_id)
        action = "Signed in" if today.is_signed_in else "Signed out"
        return jsonify({"success": True, "message": f"{action} successfully", "attendance": today.to_dict()})

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @api_errors
    def attendance_mark():
        data = json_body()
        result = service.mark_status(data.get("employee_ids") or [], data.get("status", ""))
        payload = {"success": result.failure_count == 0, **result.to_dict()}
        return jsonify(payload), 200 if result.success_count else 502

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="attendance_history")
    @api_errors
    def attendance_history(employee_id: str):
        records = service.history(employee_id, start=request.args.get("start"), end=request.args.get("end"))
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/records/<record_id>", methods=["DELETE"], endpoint="attendance_delete")
    @api_errors
    def attendance_delete(record_id: str):
        service.delete_record(record_id)
        return jsonify({"success": True})
