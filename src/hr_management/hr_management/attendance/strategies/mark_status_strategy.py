from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...core.exceptions import ValidationError
from ..model import AttendanceRecord
from .base import AttendanceStrategy, MutationAction, MutationPlan

MARKABLE_STATUSES = (AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.ABSENT)


class MarkStatusStrategy(AttendanceStrategy):
    """Set today's status explicitly (Present/Late/Absent buttons).

    Absent always clears both times. Present/Late keep an existing check-in
    and check-out, and stamp the current time when there is no check-in yet.
    """

    def __init__(self, status: AttendanceStatus):
        if status not in MARKABLE_STATUSES:
            raise ValidationError(f"Cannot mark attendance as {status.value}")
        self.status = status

    def plan(self, *, employee_id: str, today: str, clock: str, current: Optional[AttendanceRecord]) -> MutationPlan:
        absent = self.status == AttendanceStatus.ABSENT

        if current is None:
            return MutationPlan(
                action=MutationAction.CREATE,
                employee_id=employee_id,
                fields={
                    "employee_id": employee_id,
                    "date": today,
                    "status": self.status.value,
                    "check_in": "" if absent else clock,
                    "check_out": "",
                },
            )

        if absent:
            check_in = ""
        else:
            check_in = current.check_in or clock

        return MutationPlan(
            action=MutationAction.UPDATE,
            employee_id=employee_id,
            record_id=current.record_id,
            fields={
                "status": self.status.value,
                "check_in": check_in,
                "check_out": "" if absent else current.check_out,
            },
        )
