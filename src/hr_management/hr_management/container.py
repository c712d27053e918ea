from __future__ import annotations

import logging
from dataclasses import dataclass

from .analytics.service import AnalyticsService
from .attendance.factory import AttendanceMutationFactory
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_BULK_MAX_WORKERS
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .performance.repository import PerformanceRepository
from .performance.service import PerformanceService
from .projects.repository import ProjectAssignmentRepository, ProjectRepository
from .projects.service import ProjectService
from .reports.repository import ReportScheduleRepository
from .reports.service import ReportScheduleService
from .store.memory_store import InMemoryRecordStore
from .store.mysql_store import MySQLRecordStore
from .store.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: RecordStore

    employees_repo: EmployeeRepository
    departments_repo: DepartmentRepository
    attendance_repo: AttendanceRepository
    performance_repo: PerformanceRepository
    projects_repo: ProjectRepository
    assignments_repo: ProjectAssignmentRepository
    report_schedules_repo: ReportScheduleRepository

    employee_service: EmployeeService
    department_service: DepartmentService
    attendance_service: AttendanceService
    performance_service: PerformanceService
    project_service: ProjectService
    analytics_service: AnalyticsService
    report_schedule_service: ReportScheduleService


def build_store(*, backend: str, db_config: dict | None = None, auto_init_db: bool = False) -> RecordStore:
    backend = (backend or "mysql").lower()
    if backend == "memory":
        logger.info("Using in-memory record store")
        return InMemoryRecordStore()
    if backend != "mysql":
        raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
    if auto_init_db:
        apply_schema(conn)
    logger.info("Using MySQL record store at %s:%s/%s", conn.config.host, conn.config.port, conn.config.database)
    return MySQLRecordStore(conn)


def build_container(*, store: RecordStore, bulk_max_workers: int = DEFAULT_BULK_MAX_WORKERS) -> Container:
    employees_repo = EmployeeRepository(store)
    departments_repo = DepartmentRepository(store)
    attendance_repo = AttendanceRepository(store)
    performance_repo = PerformanceRepository(store)
    projects_repo = ProjectRepository(store)
    assignments_repo = ProjectAssignmentRepository(store)
    report_schedules_repo = ReportScheduleRepository(store)

    employee_service = EmployeeService(employees_repo)
    department_service = DepartmentService(departments_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        factory=AttendanceMutationFactory(),
        max_workers=bulk_max_workers,
    )
    performance_service = PerformanceService(performance_repo)
    project_service = ProjectService(projects_repo, assignments_repo)
    analytics_service = AnalyticsService(
        employees=employees_repo,
        attendance=attendance_repo,
        reviews=performance_repo,
        projects=projects_repo,
        assignments=assignments_repo,
        departments=departments_repo,
    )
    report_schedule_service = ReportScheduleService(report_schedules_repo)

    return Container(
        store=store,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        performance_repo=performance_repo,
        projects_repo=projects_repo,
        assignments_repo=assignments_repo,
        report_schedules_repo=report_schedules_repo,
        employee_service=employee_service,
        department_service=department_service,
        attendance_service=attendance_service,
        performance_service=performance_service,
        project_service=project_service,
        analytics_service=analytics_service,
        report_schedule_service=report_schedule_service,
    )
