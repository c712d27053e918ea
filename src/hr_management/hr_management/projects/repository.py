from __future__ import annotations

from ..core.constants import PROJECT_ASSIGNMENTS_TABLE, PROJECTS_TABLE
from ..store.model import WhereClause
from ..store.record_store import RecordStore
from ..store.table_repository import TableRepository
from .model import Project, ProjectAssignment


class ProjectRepository(TableRepository[Project]):
    table = PROJECTS_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=Project.from_record)

    def search_by_name(self, term: str) -> list[Project]:
        return self.fetch([WhereClause.contains("name", term)])


class ProjectAssignmentRepository(TableRepository[ProjectAssignment]):
    table = PROJECT_ASSIGNMENTS_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=ProjectAssignment.from_record)

    def for_project(self, project_id: str) -> list[ProjectAssignment]:
        return self.fetch([WhereClause.equal_to("project_id", str(project_id))])

    def for_employee(self, employee_id: str) -> list[ProjectAssignment]:
        return self.fetch([WhereClause.equal_to("employee_id", str(employee_id))])
