from __future__ import annotations

from typing import Optional

from ..core.constants import ATTENDANCE_TABLE
from ..store.model import WhereClause
from ..store.record_store import RecordStore
from ..store.table_repository import TableRepository
from .model import AttendanceRecord
from .strategies.base import MutationAction, MutationPlan


class AttendanceRepository(TableRepository[AttendanceRecord]):
    table = ATTENDANCE_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=AttendanceRecord.from_record)

    def for_employee(
        self,
        employee_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> list[AttendanceRecord]:
        where = [WhereClause.equal_to("employee_id", str(employee_id))]
        if start:
            where.append(WhereClause.at_least("date", start))
        if end:
            where.append(WhereClause.at_most("date", end))
        return self.fetch(where)

    def between(self, start: str, end: str) -> list[AttendanceRecord]:
        return self.fetch([WhereClause.at_least("date", start), WhereClause.at_most("date", end)])

    def apply(self, plan: MutationPlan) -> AttendanceRecord:
        if plan.action == MutationAction.CREATE:
            return self.create(plan.fields)
        return self.update(plan.record_id, plan.fields)
