from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict, dataclass
from typing import Optional, Union

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date
from ..core.enums import ProjectStatus
from ..core.exceptions import ValidationError
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..performance.repository import PerformanceRepository
from ..projects.repository import ProjectAssignmentRepository, ProjectRepository
from .aggregator import (
    calculate_total_hours,
    department_performance_averages,
    employee_attendance_rate,
    employee_performance_average,
    overall_attendance_rate,
    overall_performance_average,
    project_completion_rate,
    status_breakdown,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]

REPORT_COLUMNS = ("employee_id", "full_name", "department", "date", "status", "check_in", "check_out", "total_hours")


@dataclass(frozen=True)
class KpiSummary:
    total_employees: int
    attendance_rate: Number
    project_completion_rate: Number
    avg_performance_score: Number
    active_projects: int
    department_count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict[str, int]


class AnalyticsService:
    """Dashboard figures recomputed from fresh store reads on every call."""

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        reviews: PerformanceRepository,
        projects: ProjectRepository,
        assignments: ProjectAssignmentRepository,
        departments: DepartmentRepository,
    ):
        self._employees = employees
        self._attendance = attendance
        self._reviews = reviews
        self._projects = projects
        self._assignments = assignments
        self._departments = departments

    def kpis(self) -> KpiSummary:
        employees = self._employees.fetch()
        projects = self._projects.fetch()
        reviews = self._reviews.fetch()

        department_names = {d.name for d in self._departments.fetch() if d.name}
        department_names |= {e.department.value for e in employees if e.department}

        return KpiSummary(
            total_employees=len(employees),
            attendance_rate=overall_attendance_rate(self._attendance.fetch()),
            project_completion_rate=project_completion_rate(projects),
            avg_performance_score=overall_performance_average(reviews),
            active_projects=sum(1 for p in projects if p.status != ProjectStatus.COMPLETED),
            department_count=len(department_names),
        )

    def department_performance(self) -> dict[str, Number]:
        return department_performance_averages(self._reviews.fetch(), self._employees.fetch())

    def employee_summaries(self) -> list[dict]:
        employees = self._employees.fetch()
        records = self._attendance.fetch()
        reviews = self._reviews.fetch()

        project_counts: dict[str, int] = {}
        for a in self._assignments.fetch():
            project_counts[a.employee_id] = project_counts.get(a.employee_id, 0) + 1

        return [
            {
                "employee_id": e.employee_id,
                "full_name": e.full_name,
                "department": e.department.value if e.department else None,
                "attendance_rate": employee_attendance_rate(records, e.employee_id),
                "performance_average": employee_performance_average(reviews, e.employee_id),
                "projects": project_counts.get(e.employee_id, 0),
            }
            for e in employees
        ]

    def attendance_report(self, *, start: str, end: str, employee_id: Optional[str] = None) -> ReportData:
        if parse_iso_date(start) > parse_iso_date(end):
            raise ValidationError("Start date must not be after end date")

        if employee_id:
            records = self._attendance.for_employee(employee_id, start=start, end=end)
        else:
            records = self._attendance.between(start, end)
        employees = {e.employee_id: e for e in self._employees.fetch()}

        rows: list[dict] = []
        for r in records:
            emp = employees.get(r.employee_id)
            try:
                total_hours = calculate_total_hours(r.check_in, r.check_out)
                flag = None
            except ValidationError as e:
                # overnight spans and malformed stored times are flagged per row
                logger.warning("Attendance record %s: %s", r.record_id, e)
                total_hours, flag = None, str(e)
            rows.append(
                {
                    "employee_id": r.employee_id,
                    "full_name": emp.full_name if emp else "-",
                    "department": emp.department.value if emp and emp.department else "-",
                    "date": r.date,
                    "status": r.status.value,
                    "check_in": r.check_in or "-",
                    "check_out": r.check_out or "-",
                    "total_hours": total_hours,
                    "flag": flag,
                }
            )

        rows.sort(key=lambda x: (x["date"], x["employee_id"]))
        return ReportData(rows=rows, summary=status_breakdown(records))

    def export_attendance_csv(self, *, start: str, end: str, employee_id: Optional[str] = None) -> str:
        report = self.attendance_report(start=start, end=end, employee_id=employee_id)
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS, extrasaction="ignore")
        writer.writeheader()
        for row in report.rows:
            writer.writerow({**row, "total_hours": row["total_hours"] or "unsupported"})
        return out.getvalue()
