from __future__ import annotations

from datetime import datetime

import pytest

from src.hr_management.hr_management.attendance.repository import AttendanceRepository
from src.hr_management.hr_management.attendance.service import AttendanceService
from src.hr_management.hr_management.core.constants import ATTENDANCE_TABLE
from src.hr_management.hr_management.core.enums import AttendanceStatus, SignInState
from src.hr_management.hr_management.core.exceptions import NotFoundError, ValidationError
from src.hr_management.hr_management.employees.repository import EmployeeRepository
from src.hr_management.hr_management.store.memory_store import InMemoryRecordStore
from src.hr_management.hr_management.store.model import StoreResult



def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 2, 2, hour, minute)


def _today_rows(store, employee_id):
    return [r for r in store.fetch(ATTENDANCE_TABLE) if r["employee_id"] == str(employee_id)]


def test_toggle_cycle(container, store, make_employee):
    emp = make_employee()
    svc = container.attendance_service

    first = svc.toggle(emp.employee_id, now=_at(9))
    rows = _today_rows(store, emp.employee_id)
    assert len(rows) == 1
    assert rows[0]["status"] == "Present"
    assert rows[0]["check_in"] == "09:00"
    assert rows[0]["check_out"] == ""
    assert first.is_signed_in and first.sign_in_time == "09:00"

    second = svc.toggle(emp.employee_id, now=_at(17, 30))
    rows = _today_rows(store, emp.employee_id)
    assert len(rows) == 1
    assert rows[0]["check_out"] == "17:30"
    assert rows[0]["check_in"] == "09:00"
    assert rows[0]["status"] == "Present"
    assert second.state == SignInState.SIGNED_OUT

    third = svc.toggle(emp.employee_id, now=_at(18, 5))
    rows = _today_rows(store, emp.employee_id)
    assert len(rows) == 2
    assert rows[0]["check_out"] == "17:30"
    assert third.is_signed_in
    assert third.sign_in_time == "18:05"
    assert third.record.record_id == str(rows[1]["id"])


def test_toggle_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.toggle("999")


def test_toggle_ignores_other_days(container, store, make_employee):
    emp = make_employee()
    store.create(
        ATTENDANCE_TABLE,
        [{"employee_id": emp.employee_id, "date": "2026-02-01", "status": "Present", "check_in": "09:00", "check_out": ""}],
    )

    today = container.attendance_service.toggle(emp.employee_id, now=_at(9))

    assert today.is_signed_in
    assert len(store.fetch(ATTENDANCE_TABLE)) == 2


def test_mark_absent_clears_times(container, store, make_employee, fixed_now):
    emp = make_employee()
    svc = container.attendance_service
    svc.toggle(emp.employee_id, now=_at(8, 30))
    svc.toggle(emp.employee_id, now=_at(12))

    result = svc.mark_status([emp.employee_id], "Absent", now=_at(13))

    row = _today_rows(store, emp.employee_id)[-1]
    assert result.success_count == 1
    assert row["status"] == "Absent"
    assert row["check_in"] == "" and row["check_out"] == ""
    assert result.today[emp.employee_id].today_status == AttendanceStatus.ABSENT


def test_mark_late_preserves_existing_check_in(container, store, make_employee):
    emp = make_employee()
    svc = container.attendance_service
    svc.toggle(emp.employee_id, now=_at(8, 30))

    svc.mark_status([emp.employee_id], AttendanceStatus.LATE, now=_at(10, 15))

    row = _today_rows(store, emp.employee_id)[-1]
    assert row["status"] == "Late"
    assert row["check_in"] == "08:30"


def test_mark_without_record_creates_one(container, store, make_employee, fixed_now):
    emp = make_employee()

    today = container.attendance_service.mark_one(emp.employee_id, "Present", now=fixed_now)

    assert today.today_status == AttendanceStatus.PRESENT
    assert today.sign_in_time == "09:00"


def test_bulk_mark_reports_partial_success(flaky_store):
    inner = InMemoryRecordStore()
    employees = EmployeeRepository(inner)
    ids = [
        employees.create({"first_name": n, "last_name": "X", "email": f"{n}@x.io", "status": "Active"}).employee_id
        for n in ("a", "b", "c")
    ]
    store = flaky_store(inner, fail_employee_ids=[ids[1]])
    svc = AttendanceService(AttendanceRepository(store), EmployeeRepository(store), max_workers=3)

    result = svc.mark_status(ids, "Late", now=_at(9, 20))

    assert result.success_count == 2
    assert result.failure_count == 1
    assert set(result.succeeded) == {ids[0], ids[2]}
    assert ids[1] in result.failed
    assert "2 of 3" in result.message

    # the re-fetch reflects what actually landed
    assert result.today[ids[0]].today_status == AttendanceStatus.LATE
    assert result.today[ids[1]].today_status == AttendanceStatus.NOT_MARKED
    assert result.today[ids[2]].today_status == AttendanceStatus.LATE


def test_bulk_mark_survives_raised_store_errors(flaky_store):
    inner = InMemoryRecordStore()
    employees = EmployeeRepository(inner)
    ids = [
        employees.create({"first_name": n, "last_name": "X", "email": f"{n}@x.io", "status": "Active"}).employee_id
        for n in ("a", "b")
    ]
    store = flaky_store(inner, fail_employee_ids=[ids[0]], fail_with="raise")
    svc = AttendanceService(AttendanceRepository(store), EmployeeRepository(store))

    result = svc.mark_status(ids, "Present", now=_at(9))

    assert result.succeeded == [ids[1]]
    assert "unreachable" in result.failed[ids[0]]


def test_bulk_mark_updates_existing_records_independently(flaky_store):
    inner = InMemoryRecordStore()
    employees = EmployeeRepository(inner)
    ids = [
        employees.create({"first_name": n, "last_name": "X", "email": f"{n}@x.io", "status": "Active"}).employee_id
        for n in ("a", "b")
    ]
    svc = AttendanceService(AttendanceRepository(inner), employees)
    svc.mark_status(ids, "Present", now=_at(9))

    flaky = flaky_store(inner, fail_employee_ids=[ids[0]])
    flaky_svc = AttendanceService(AttendanceRepository(flaky), EmployeeRepository(flaky))
    result = flaky_svc.mark_status(ids, "Absent", now=_at(11))

    assert result.succeeded == [ids[1]]
    assert result.today[ids[0]].today_status == AttendanceStatus.PRESENT
    assert result.today[ids[1]].today_status == AttendanceStatus.ABSENT


def test_bulk_mark_without_selection_never_touches_store(flaky_store):
    store = flaky_store(InMemoryRecordStore())
    svc = AttendanceService(AttendanceRepository(store), EmployeeRepository(store))

    with pytest.raises(ValidationError):
        svc.mark_status([], "Present")

    assert store.calls == []


def test_bulk_mark_rejects_unknown_status(container, make_employee):
    emp = make_employee()

    with pytest.raises(ValidationError):
        container.attendance_service.mark_status([emp.employee_id], "Sick")
    with pytest.raises(ValidationError):
        container.attendance_service.mark_status([emp.employee_id], "Not Marked")


def test_today_overview_lists_every_employee(container, make_employee):
    a = make_employee("Ann")
    b = make_employee("Bob")
    container.attendance_service.toggle(a.employee_id, now=_at(9))

    overview = dict((e.employee_id, t) for e, t in container.attendance_service.today_overview(now=_at(10)))

    assert overview[a.employee_id].is_signed_in
    assert overview[b.employee_id].today_status == AttendanceStatus.NOT_MARKED


def test_history_filters_by_date_range(container, store, make_employee):
    emp = make_employee()
    for day in ("2026-01-30", "2026-02-01", "2026-02-03"):
        store.create(
            ATTENDANCE_TABLE,
            [{"employee_id": emp.employee_id, "date": day, "status": "Present", "check_in": "09:00", "check_out": "17:00"}],
        )

    records = container.attendance_service.history(emp.employee_id, start="2026-02-01", end="2026-02-02")

    assert [r.date for r in records] == ["2026-02-01"]


@pytest.mark.parametrize(
    "bounds,expected",
    [
        ({"start": "2026-02-01"}, ["2026-02-01", "2026-02-03"]),
        ({"end": "2026-02-01"}, ["2026-01-30", "2026-02-01"]),
    ],
)
def test_history_with_a_single_bound(container, store, make_employee, bounds, expected):
    emp = make_employee()
    for day in ("2026-01-30", "2026-02-01", "2026-02-03"):
        store.create(
            ATTENDANCE_TABLE,
            [{"employee_id": emp.employee_id, "date": day, "status": "Present", "check_in": "09:00", "check_out": "17:00"}],
        )

    records = container.attendance_service.history(emp.employee_id, **bounds)

    assert [r.date for r in records] == expected


class _UnreadableWriteStore(InMemoryRecordStore):
    """Acknowledges attendance writes for one employee with a row that cannot be read back."""

    def __init__(self, bad_employee_id):
        super().__init__()
        self.bad_employee_id = str(bad_employee_id)

    def create(self, table, records):
        if table == ATTENDANCE_TABLE and str(records[0].get("employee_id")) == self.bad_employee_id:
            return [StoreResult(success=True, data={**records[0], "id": 999, "status": "Holiday"})]
        return super().create(table, records)


def test_bulk_mark_keeps_tally_when_a_worker_fails_unexpectedly():
    store = _UnreadableWriteStore(bad_employee_id="x")
    employees = EmployeeRepository(store)
    ids = [
        employees.create({"first_name": n, "last_name": "X", "email": f"{n}@x.io", "status": "Active"}).employee_id
        for n in ("a", "b")
    ]
    store.bad_employee_id = ids[0]
    svc = AttendanceService(AttendanceRepository(store), employees)

    result = svc.mark_status(ids, "Present", now=_at(9))

    assert result.succeeded == [ids[1]]
    assert ids[0] in result.failed
    assert result.refreshed
    assert result.today[ids[1]].today_status == AttendanceStatus.PRESENT


@pytest.mark.parametrize("selection", ["12", None, 12])
def test_bulk_mark_rejects_non_list_selection(flaky_store, selection):
    store = flaky_store(InMemoryRecordStore())
    svc = AttendanceService(AttendanceRepository(store), EmployeeRepository(store))

    with pytest.raises(ValidationError):
        svc.mark_status(selection, "Present")

    assert store.calls == []
