from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, StoreError
from .model import DepartmentRecord
from .repository import DepartmentRepository


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self, term: str = "") -> list[DepartmentRecord]:
        term = (term or "").strip()
        if term:
            return self._departments.search_by_name(term)
        return self._departments.fetch()

    def create(self, name: str) -> DepartmentRecord:
        return self._departments.create({"name": require_non_empty(name, "Department name")})

    def rename(self, department_id: str, name: str) -> DepartmentRecord:
        name = require_non_empty(name, "Department name")
        if not self._departments.get_by_id(department_id):
            raise NotFoundError(f"Department {department_id} not found")
        return self._departments.update(department_id, {"name": name})

    def delete(self, department_id: str) -> None:
        if not self._departments.delete(department_id):
            raise StoreError(f"Failed to delete department {department_id}")
