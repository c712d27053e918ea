from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    """Domain entity: Project.

    `assigned_employee_ids` is not stored on the project; it is joined in from
    ProjectAssignment records at read time.
    """

    project_id: str
    name: str
    status: ProjectStatus
    progress: int
    end_date: str
    description: str = ""
    assigned_employee_ids: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "Project":
        return cls(
            project_id=str(r["id"]),
            name=r.get("name") or "",
            status=ProjectStatus(r.get("status") or ProjectStatus.PLANNING.value),
            progress=int(r.get("progress") or 0),
            end_date=r.get("end_date") or "",
            description=r.get("description") or "",
        )

    def with_assignments(self, employee_ids) -> "Project":
        return replace(self, assigned_employee_ids=tuple(employee_ids))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.project_id,
            "name": self.name,
            "status": self.status.value,
            "progress": self.progress,
            "end_date": self.end_date,
            "description": self.description,
            "assigned_employee_ids": list(self.assigned_employee_ids),
        }


@dataclass(frozen=True)
class ProjectAssignment:
    """Many-to-many join between employees and projects."""

    assignment_id: str
    employee_id: str
    project_id: str

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "ProjectAssignment":
        return cls(
            assignment_id=str(r["id"]),
            employee_id=str(r.get("employee_id") or ""),
            project_id=str(r.get("project_id") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.assignment_id, "employee_id": self.employee_id, "project_id": self.project_id}
