from __future__ import annotations

from typing import Optional

from ...core.exceptions import ValidationError
from ..model import AttendanceRecord
from .base import AttendanceStrategy, MutationAction, MutationPlan


class SignOutStrategy(AttendanceStrategy):
    """Close the open cycle: only check_out changes, check_in and status stay."""

    def plan(self, *, employee_id: str, today: str, clock: str, current: Optional[AttendanceRecord]) -> MutationPlan:
        if current is None or current.check_out:
            raise ValidationError("Employee is not signed in")
        return MutationPlan(
            action=MutationAction.UPDATE,
            employee_id=employee_id,
            record_id=current.record_id,
            fields={"check_out": clock},
        )
