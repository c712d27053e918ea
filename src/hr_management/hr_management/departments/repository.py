from __future__ import annotations

from ..core.constants import DEPARTMENTS_TABLE
from ..store.model import WhereClause
from ..store.record_store import RecordStore
from ..store.table_repository import TableRepository
from .model import DepartmentRecord


class DepartmentRepository(TableRepository[DepartmentRecord]):
    table = DEPARTMENTS_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=DepartmentRecord.from_record)

    def search_by_name(self, term: str) -> list[DepartmentRecord]:
        return self.fetch([WhereClause.contains("name", term)])
