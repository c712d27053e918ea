from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, MutationAction, MutationPlan


class SignInStrategy(AttendanceStrategy):
    """Start a new sign-in cycle.

    Always creates a record, also when an earlier cycle of the same day is
    already signed out.
    """

    def plan(self, *, employee_id: str, today: str, clock: str, current: Optional[AttendanceRecord]) -> MutationPlan:
        return MutationPlan(
            action=MutationAction.CREATE,
            employee_id=employee_id,
            fields={
                "employee_id": employee_id,
                "date": today,
                "status": AttendanceStatus.PRESENT.value,
                "check_in": clock,
                "check_out": "",
            },
        )
