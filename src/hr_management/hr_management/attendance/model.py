from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import AttendanceStatus, SignInState


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row (one sign-in cycle or a status mark).

    `date` is the calendar day (YYYY-MM-DD); `check_in`/`check_out` are HH:MM
    strings, empty when not set. The store does not enforce one record per
    (employee_id, date).
    """

    record_id: str
    employee_id: str
    date: str
    status: AttendanceStatus
    check_in: str = ""
    check_out: str = ""

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "AttendanceRecord":
        return cls(
            record_id=str(r["id"]),
            employee_id=str(r.get("employee_id") or ""),
            date=str(r.get("date") or ""),
            status=AttendanceStatus(r.get("status") or AttendanceStatus.PRESENT.value),
            check_in=r.get("check_in") or "",
            check_out=r.get("check_out") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "date": self.date,
            "status": self.status.value,
            "check_in": self.check_in,
            "check_out": self.check_out,
        }


@dataclass(frozen=True)
class TodayAttendance:
    """Read-model: an employee's attendance state for the current day."""

    employee_id: str
    state: SignInState
    today_status: AttendanceStatus
    sign_in_time: Optional[str] = None
    record: Optional[AttendanceRecord] = None

    @property
    def is_signed_in(self) -> bool:
        return self.state == SignInState.SIGNED_IN

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "state": self.state.value,
            "is_signed_in": self.is_signed_in,
            "sign_in_time": self.sign_in_time,
            "today_status": self.today_status.value,
            "record": self.record.to_dict() if self.record else None,
        }
