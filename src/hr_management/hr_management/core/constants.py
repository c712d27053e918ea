"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

NOT_AVAILABLE = "N/A"
IN_PROGRESS = "In Progress"

DEFAULT_BULK_MAX_WORKERS = 8

EMPLOYEES_TABLE = "employees"
DEPARTMENTS_TABLE = "departments"
ATTENDANCE_TABLE = "attendance"
PERFORMANCE_TABLE = "performance_reviews"
PROJECTS_TABLE = "projects"
PROJECT_ASSIGNMENTS_TABLE = "project_assignments"
REPORT_SCHEDULES_TABLE = "report_schedules"

# Column sets per table (the "id" column is implicit).
TABLE_FIELDS: dict[str, tuple[str, ...]] = {
    EMPLOYEES_TABLE: ("first_name", "last_name", "email", "department", "position", "status", "hire_date"),
    DEPARTMENTS_TABLE: ("name",),
    ATTENDANCE_TABLE: ("employee_id", "date", "status", "check_in", "check_out"),
    PERFORMANCE_TABLE: ("employee_id", "quarter", "score", "review_date", "goals"),
    PROJECTS_TABLE: ("name", "status", "progress", "end_date", "description"),
    PROJECT_ASSIGNMENTS_TABLE: ("employee_id", "project_id"),
    REPORT_SCHEDULES_TABLE: ("frequency", "email", "enabled"),
}
