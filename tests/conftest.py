from __future__ import annotations

from datetime import datetime

import pytest

from src.hr_management.hr_management.container import build_container
from src.hr_management.hr_management.core.constants import ATTENDANCE_TABLE
from src.hr_management.hr_management.store.memory_store import InMemoryRecordStore
from src.hr_management.hr_management.store.model import StoreResult


class FlakyStore:
    """Wraps a store; attendance writes for selected employees fail.

    `fail_with` picks how: "result" returns success=False, "raise" raises.
    """

    def __init__(self, inner, fail_employee_ids=(), *, fail_with="result"):
        self._inner = inner
        self.fail_employee_ids = {str(e) for e in fail_employee_ids}
        self.fail_with = fail_with
        self.calls: list[tuple[str, str]] = []

    def _fails(self, table, rec) -> bool:
        if table != ATTENDANCE_TABLE:
            return False
        eid = rec.get("employee_id")
        if eid is None and rec.get("id") is not None:
            eid = (self._inner.get_by_id(table, rec["id"]) or {}).get("employee_id")
        return str(eid) in self.fail_employee_ids

    def _write(self, op, table, records):
        self.calls.append((op, table))
        results = []
        for rec in records:
            if self._fails(table, rec):
                if self.fail_with == "raise":
                    raise ConnectionError("record store unreachable")
                results.append(StoreResult(success=False, message="simulated outage"))
            else:
                results.extend(getattr(self._inner, op)(table, [rec]))
        return results

    def fetch(self, table, *, fields=None, where=None):
        self.calls.append(("fetch", table))
        return self._inner.fetch(table, fields=fields, where=where)

    def get_by_id(self, table, record_id, *, fields=None):
        self.calls.append(("get_by_id", table))
        return self._inner.get_by_id(table, record_id, fields=fields)

    def create(self, table, records):
        return self._write("create", table, records)

    def update(self, table, records):
        return self._write("update", table, records)

    def delete(self, table, ids):
        self.calls.append(("delete", table))
        return self._inner.delete(table, ids)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(store):
    return build_container(store=store, bulk_max_workers=4)


@pytest.fixture
def make_employee(container):
    def _make(first_name="Sarah", last_name="Johnson", department="Engineering", **kwargs):
        return container.employee_service.create(
            first_name=first_name,
            last_name=last_name,
            email=kwargs.pop("email", f"{first_name.lower()}@company.com"),
            department=department,
            **kwargs,
        )

    return _make


@pytest.fixture
def flaky_store():
    return FlakyStore
