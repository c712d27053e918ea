from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance statuses stored on a record, plus the derived default."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    NOT_MARKED = "Not Marked"


class SignInState(str, Enum):
    """Per employee-day state inferred from today's attendance record."""

    NO_RECORD = "NO_RECORD"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Department(str, Enum):
    ENGINEERING = "Engineering"
    DESIGN = "Design"
    MARKETING = "Marketing"
    SALES = "Sales"
    HR = "HR"
    FINANCE = "Finance"


class ProjectStatus(str, Enum):
    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ReportFrequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class WhereOperator(str, Enum):
    """Filter operators understood by every Record Store."""

    EQUAL_TO = "EqualTo"
    CONTAINS = "Contains"
    GREATER_THAN_OR_EQUAL_TO = "GreaterThanOrEqualTo"
    LESS_THAN_OR_EQUAL_TO = "LessThanOrEqualTo"
