"""Statistics over already-fetched record collections.

Pure functions, no I/O. Per-employee figures are formatted strings with a
"N/A" sentinel; the global figures are numbers with 0 for empty input.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import minutes_since_midnight
from ..core.constants import IN_PROGRESS, NOT_AVAILABLE
from ..core.enums import AttendanceStatus, Department
from ..core.exceptions import UnsupportedDurationError, ValidationError
from ..employees.model import Employee
from ..performance.model import PerformanceReview
from ..projects.model import Project

Number = Union[int, float]


def employee_attendance_rate(records: Sequence[AttendanceRecord], employee_id: str) -> str:
    """Share of the employee's records marked Present, e.g. "50.0"."""
    mine = [r for r in records if r.employee_id == str(employee_id)]
    if not mine:
        return NOT_AVAILABLE
    present = sum(1 for r in mine if r.status == AttendanceStatus.PRESENT)
    return f"{present / len(mine) * 100:.1f}"


def overall_attendance_rate(records: Sequence[AttendanceRecord]) -> Number:
    if not records:
        return 0
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    return round(present / len(records) * 100, 1)


def employee_performance_average(reviews: Sequence[PerformanceReview], employee_id: str) -> str:
    scores = [r.score for r in reviews if r.employee_id == str(employee_id)]
    if not scores:
        return NOT_AVAILABLE
    return f"{sum(scores) / len(scores):.1f}"


def overall_performance_average(reviews: Sequence[PerformanceReview]) -> Number:
    if not reviews:
        return 0
    return round(sum(r.score for r in reviews) / len(reviews), 1)


def department_performance_averages(
    reviews: Sequence[PerformanceReview],
    employees: Sequence[Employee],
    departments: Iterable[Department] = tuple(Department),
) -> dict[str, Number]:
    """Average review score per department, two decimals, 0 when a department has none."""
    department_of = {e.employee_id: e.department for e in employees}
    out: dict[str, Number] = {}
    for dept in departments:
        scores = [r.score for r in reviews if department_of.get(r.employee_id) == dept]
        out[dept.value] = round(sum(scores) / len(scores), 2) if scores else 0
    return out


def project_completion_rate(projects: Sequence[Project]) -> Number:
    if not projects:
        return 0
    return round(sum(p.progress for p in projects) / len(projects), 1)


def status_breakdown(records: Sequence[AttendanceRecord]) -> dict[str, int]:
    counts = {s.value: 0 for s in (AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.ABSENT)}
    for r in records:
        if r.status.value in counts:
            counts[r.status.value] += 1
    return counts


def calculate_total_hours(check_in: str, check_out: str) -> str:
    """Elapsed time between two HH:MM times of the same day, as "8h 30m".

    Overnight spans (check-out earlier than check-in) are not supported and
    raise UnsupportedDurationError.
    """
    if not check_in:
        return NOT_AVAILABLE
    if not check_out:
        return IN_PROGRESS
    try:
        diff = minutes_since_midnight(check_out) - minutes_since_midnight(check_in)
    except ValueError:
        raise ValidationError(f"Invalid time (expected HH:MM): {check_in!r} / {check_out!r}")
    if diff < 0:
        raise UnsupportedDurationError(f"Check-out {check_out} is earlier than check-in {check_in}")
    return f"{diff // 60}h {diff % 60}m"
