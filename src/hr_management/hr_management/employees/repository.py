from __future__ import annotations

from ..core.constants import EMPLOYEES_TABLE
from ..store.model import WhereClause
from ..store.record_store import RecordStore
from ..store.table_repository import TableRepository
from .model import Employee


class EmployeeRepository(TableRepository[Employee]):
    table = EMPLOYEES_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=Employee.from_record)

    def search_by_first_name(self, term: str) -> list[Employee]:
        return self.fetch([WhereClause.contains("first_name", term)])
