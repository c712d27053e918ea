from __future__ import annotations

from datetime import date

from flask import Flask, Response, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service
    schedules = container.report_schedule_service

    def _range() -> tuple[str, str]:
        today = date.today()
        start = request.args.get("start") or today.replace(day=1).strftime("%Y-%m-%d")
        end = request.args.get("end") or today.strftime("%Y-%m-%d")
        return start, end

    @app.route("/api/analytics/kpis", methods=["GET"], endpoint="analytics_kpis")
    @api_errors
    def analytics_kpis():
        return jsonify(analytics.kpis().to_dict())

    @app.route("/api/analytics/departments", methods=["GET"], endpoint="analytics_departments")
    @api_errors
    def analytics_departments():
        return jsonify(analytics.department_performance())

    @app.route("/api/analytics/employees", methods=["GET"], endpoint="analytics_employees")
    @api_errors
    def analytics_employees():
        return jsonify(analytics.employee_summaries())

    @app.route("/api/analytics/attendance-report", methods=["GET"], endpoint="analytics_attendance_report")
    @api_errors
    def analytics_attendance_report():
        start, end = _range()
        report = analytics.attendance_report(start=start, end=end, employee_id=request.args.get("employee_id"))
        return jsonify({"start": start, "end": end, "rows": report.rows, "summary": report.summary})

    @app.route("/api/analytics/attendance-report.csv", methods=["GET"], endpoint="analytics_attendance_csv")
    @api_errors
    def analytics_attendance_csv():
        start, end = _range()
        body = analytics.export_attendance_csv(start=start, end=end, employee_id=request.args.get("employee_id"))
        filename = f"attendance_{start}_{end}.csv"
        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/schedules", methods=["GET"], endpoint="list_report_schedules")
    @api_errors
    def list_report_schedules():
        return jsonify([s.to_dict() for s in schedules.list_schedules()])

    @app.route("/api/reports/schedules", methods=["POST"], endpoint="create_report_schedule")
    @api_errors
    def create_report_schedule():
        data = json_body()
        created = schedules.schedule(
            email=data.get("email", ""),
            frequency=data.get("frequency"),
            enabled=bool(data.get("enabled", True)),
        )
        return jsonify(created.to_dict()), 201

    @app.route("/api/reports/schedules/<schedule_id>", methods=["PUT"], endpoint="update_report_schedule")
    @api_errors
    def update_report_schedule(schedule_id: str):
        return jsonify(schedules.update(schedule_id, json_body()).to_dict())

    @app.route("/api/reports/schedules/<schedule_id>", methods=["DELETE"], endpoint="delete_report_schedule")
    @api_errors
    def delete_report_schedule(schedule_id: str):
        schedules.delete(schedule_id)
        return jsonify({"success": True})
