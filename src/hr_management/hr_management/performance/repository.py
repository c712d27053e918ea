from __future__ import annotations

from ..core.constants import PERFORMANCE_TABLE
from ..store.model import WhereClause
from ..store.record_store import RecordStore
from ..store.table_repository import TableRepository
from .model import PerformanceReview


class PerformanceRepository(TableRepository[PerformanceReview]):
    table = PERFORMANCE_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=PerformanceReview.from_record)

    def for_employee(self, employee_id: str) -> list[PerformanceReview]:
        return self.fetch([WhereClause.equal_to("employee_id", str(employee_id))])
