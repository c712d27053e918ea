from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import clock_time, day_key, now_local, parse_iso_date
from ..common.validators import require_choice, require_non_empty, require_selection
from ..core.constants import DEFAULT_BULK_MAX_WORKERS
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, NotFoundError, StoreError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .deriver import derive_all, derive_today, select_today_record
from .factory import AttendanceMutationFactory
from .model import AttendanceRecord, TodayAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkMarkResult:
    """Aggregate outcome of marking several employees; partial success is normal."""

    status: AttendanceStatus
    requested: list[str]
    succeeded: list[str]
    failed: dict[str, str]
    today: dict[str, TodayAttendance] = field(default_factory=dict)
    refreshed: bool = True

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def message(self) -> str:
        if not self.failed:
            return f"Marked {self.success_count} employee(s) as {self.status.value}"
        return (
            f"Marked {self.success_count} of {len(self.requested)} employee(s) as {self.status.value}; "
            f"{self.failure_count} failed"
        )

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "succeeded": list(self.succeeded),
            "failed": dict(self.failed),
            "message": self.message,
            "refreshed": self.refreshed,
            "today": {eid: t.to_dict() for eid, t in self.today.items()},
        }


class AttendanceService:
    """Use cases: sign in/out toggle, status marking and today's overview.

    The store is the source of truth: every mutation is followed by a fresh
    fetch before state is derived again.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        factory: AttendanceMutationFactory | None = None,
        max_workers: int = DEFAULT_BULK_MAX_WORKERS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = factory or AttendanceMutationFactory()
        self._max_workers = max(1, int(max_workers))
        self._clock = clock

    def today_for(self, employee_id: str, *, now: datetime | None = None) -> TodayAttendance:
        now = now or self._clock()
        return derive_today(self._attendance.fetch(), str(employee_id), day_key(now))

    def today_overview(
        self, employees: Optional[Sequence[Employee]] = None, *, now: datetime | None = None
    ) -> list[tuple[Employee, TodayAttendance]]:
        now = now or self._clock()
        employees = list(employees) if employees is not None else self._employees.fetch()
        state = derive_all(self._attendance.fetch(), [e.employee_id for e in employees], day_key(now))
        return [(e, state[e.employee_id]) for e in employees]

    def toggle(self, employee_id: str, *, now: datetime | None = None) -> TodayAttendance:
        employee_id = require_non_empty(str(employee_id or ""), "Employee")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

        now = now or self._clock()
        today = day_key(now)

        current = derive_today(self._attendance.fetch(), employee_id, today)
        strategy = self._factory.for_toggle(current.state)
        plan = strategy.plan(employee_id=employee_id, today=today, clock=clock_time(now), current=current.record)
        self._attendance.apply(plan)
        logger.info("Attendance toggle for %s: %s -> %s", employee_id, current.state.value, plan.action.value)

        return derive_today(self._attendance.fetch(), employee_id, today)

    def mark_status(
        self,
        employee_ids: Iterable[str],
        status: str | AttendanceStatus,
        *,
        now: datetime | None = None,
    ) -> BulkMarkResult:
        if isinstance(employee_ids, (str, bytes)) or not isinstance(employee_ids, Iterable):
            raise ValidationError("employee_ids must be a list of employee ids")
        ids = list(dict.fromkeys(str(i).strip() for i in require_selection(employee_ids, "employee")))
        mark = require_choice(status, AttendanceStatus, "Status")
        if mark == AttendanceStatus.NOT_MARKED:
            raise ValidationError("Status must be one of: Present, Late, Absent")
        strategy = self._factory.for_mark(mark)

        now = now or self._clock()
        today = day_key(now)
        clock = clock_time(now)
        records = self._attendance.fetch()

        def _mark_one(employee_id: str) -> AttendanceRecord:
            current = select_today_record(records, employee_id, today)
            plan = strategy.plan(employee_id=employee_id, today=today, clock=clock, current=current)
            return self._attendance.apply(plan)

        succeeded: list[str] = []
        failed: dict[str, str] = {}
        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(ids))) as pool:
            futures = [(eid, pool.submit(_mark_one, eid)) for eid in ids]
            for eid, future in futures:
                try:
                    future.result()
                    succeeded.append(eid)
                except (DomainError, ValueError) as e:
                    logger.warning("Marking %s as %s failed: %s", eid, mark.value, e)
                    failed[eid] = str(e)

        today_state: dict[str, TodayAttendance] = {}
        refreshed = True
        try:
            today_state = derive_all(self._attendance.fetch(), ids, today)
        except StoreError:
            logger.exception("Re-fetching attendance after bulk mark failed")
            refreshed = False

        result = BulkMarkResult(
            status=mark,
            requested=ids,
            succeeded=succeeded,
            failed=failed,
            today=today_state,
            refreshed=refreshed,
        )
        logger.info(result.message)
        return result

    def mark_one(self, employee_id: str, status: str | AttendanceStatus, *, now: datetime | None = None) -> TodayAttendance:
        result = self.mark_status([employee_id], status, now=now)
        if result.failed:
            raise StoreError(next(iter(result.failed.values())))
        if employee_id in result.today:
            return result.today[employee_id]
        return self.today_for(employee_id, now=now)

    def history(self, employee_id: str, *, start: str | None = None, end: str | None = None) -> list[AttendanceRecord]:
        if start:
            parse_iso_date(start)
        if end:
            parse_iso_date(end)
        return self._attendance.for_employee(str(employee_id), start=start, end=end)

    def delete_record(self, record_id: str) -> None:
        if not self._attendance.delete(record_id):
            raise StoreError(f"Failed to delete attendance record {record_id}")
