"""Derive an employee's current-day attendance state from raw records.

All functions are pure: the same records and day always give the same answer,
so state is recomputed on every read instead of cached.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus, SignInState
from .model import AttendanceRecord, TodayAttendance


def select_today_record(
    records: Sequence[AttendanceRecord], employee_id: str, today: str
) -> Optional[AttendanceRecord]:
    """Return the authoritative record for (employee, today), if any.

    Several records may exist for the same day (one per sign-in cycle). The
    last one in collection order wins; records carry no timestamp to break ties.
    """
    employee_id = str(employee_id)
    matches = [r for r in records if r.employee_id == employee_id and r.date == today]
    return matches[-1] if matches else None


def derive_today(records: Sequence[AttendanceRecord], employee_id: str, today: str) -> TodayAttendance:
    record = select_today_record(records, employee_id, today)
    if record is None:
        return TodayAttendance(
            employee_id=str(employee_id),
            state=SignInState.NO_RECORD,
            today_status=AttendanceStatus.NOT_MARKED,
        )

    if not record.check_out:
        return TodayAttendance(
            employee_id=str(employee_id),
            state=SignInState.SIGNED_IN,
            today_status=record.status,
            sign_in_time=record.check_in,
            record=record,
        )

    return TodayAttendance(
        employee_id=str(employee_id),
        state=SignInState.SIGNED_OUT,
        today_status=record.status,
        record=record,
    )


def derive_all(records: Sequence[AttendanceRecord], employee_ids: Iterable[str], today: str) -> dict[str, TodayAttendance]:
    return {str(eid): derive_today(records, eid, today) for eid in employee_ids}
