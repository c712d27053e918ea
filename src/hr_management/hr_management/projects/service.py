from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.enums import ProjectStatus
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from .model import Project, ProjectAssignment
from .repository import ProjectAssignmentRepository, ProjectRepository

logger = logging.getLogger(__name__)

_EDITABLE = ("name", "status", "progress", "end_date", "description")


def _progress(value: Any) -> int:
    try:
        progress = int(value or 0)
    except (TypeError, ValueError):
        raise ValidationError("Progress must be a whole number")
    return min(max(progress, 0), 100)


class ProjectService:
    """Use cases: projects and their employee assignments."""

    def __init__(self, projects: ProjectRepository, assignments: ProjectAssignmentRepository):
        self._projects = projects
        self._assignments = assignments

    def _join(self, projects: list[Project]) -> list[Project]:
        by_project: dict[str, list[str]] = defaultdict(list)
        for a in self._assignments.fetch():
            by_project[a.project_id].append(a.employee_id)
        return [p.with_assignments(by_project.get(p.project_id, ())) for p in projects]

    def list_projects(self, term: str = "") -> list[Project]:
        term = (term or "").strip()
        projects = self._projects.search_by_name(term) if term else self._projects.fetch()
        return self._join(projects)

    def get(self, project_id: str) -> Project:
        project = self._projects.get_by_id(project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project.with_assignments(a.employee_id for a in self._assignments.for_project(project_id))

    def create(
        self,
        *,
        name: str,
        end_date: str,
        status: Optional[str] = None,
        progress: Any = 0,
        description: str = "",
        employee_ids: Optional[Iterable[str]] = None,
    ) -> Project:
        name = require_non_empty(name, "Project name")
        end_date = require_non_empty(end_date, "End date")
        parse_iso_date(end_date)
        project_status = require_choice(status or ProjectStatus.PLANNING.value, ProjectStatus, "Status")

        project = self._projects.create(
            {
                "name": name,
                "status": project_status.value,
                "progress": _progress(progress),
                "end_date": end_date,
                "description": (description or "").strip(),
            }
        )
        logger.info("Created project %s (%s)", project.project_id, project.name)
        if employee_ids:
            assigned = self.replace_assignments(project.project_id, employee_ids)
            project = project.with_assignments(a.employee_id for a in assigned)
        return project

    def update(self, project_id: str, changes: dict[str, Any]) -> Project:
        self.get(project_id)
        fields = {k: v for k, v in changes.items() if k in _EDITABLE}
        if "name" in fields:
            fields["name"] = require_non_empty(fields["name"], "Project name")
        if "end_date" in fields:
            fields["end_date"] = require_non_empty(fields["end_date"], "End date")
            parse_iso_date(fields["end_date"])
        if "status" in fields:
            fields["status"] = require_choice(fields["status"], ProjectStatus, "Status").value
        if "progress" in fields:
            fields["progress"] = _progress(fields["progress"])
        if fields:
            self._projects.update(project_id, fields)
        if "employee_ids" in changes:
            self.replace_assignments(project_id, changes.get("employee_ids") or [])
        return self.get(project_id)

    def delete(self, project_id: str) -> None:
        if not self._projects.delete(project_id):
            raise StoreError(f"Failed to delete project {project_id}")

    def assignments_for_employee(self, employee_id: str) -> list[ProjectAssignment]:
        return self._assignments.for_employee(employee_id)

    def replace_assignments(self, project_id: str, employee_ids: Iterable[str]) -> list[ProjectAssignment]:
        """Replace-all: drop every assignment of the project, then create the new set."""
        wanted = list(dict.fromkeys(str(e).strip() for e in employee_ids if e is not None and str(e).strip()))

        existing = self._assignments.for_project(project_id)
        removed = self._assignments.delete_many([a.assignment_id for a in existing])
        if any(not r.success for r in removed):
            raise StoreError(f"Failed to clear assignments of project {project_id}")

        results = self._assignments.create_many(
            [{"employee_id": eid, "project_id": str(project_id)} for eid in wanted]
        )
        failures = [r.message or "unknown error" for r in results if not r.success]
        if failures:
            logger.warning("Project %s: %d assignment(s) failed: %s", project_id, len(failures), "; ".join(failures))
            raise StoreError(f"Failed to assign {len(failures)} employee(s) to project {project_id}")

        logger.info("Project %s assignments replaced: %d removed, %d created", project_id, len(existing), len(results))
        return [ProjectAssignment.from_record(r.data or {}) for r in results]
