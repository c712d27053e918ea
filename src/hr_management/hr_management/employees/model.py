from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import Department, EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, no store access. Department is one of the
    enumerated departments or None when unset.
    """

    employee_id: str
    first_name: str
    last_name: str
    email: str
    department: Optional[Department]
    position: str
    status: EmployeeStatus
    hire_date: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "Employee":
        dept = r.get("department") or None
        try:
            department = Department(dept) if dept else None
        except ValueError:
            department = None
        return cls(
            employee_id=str(r["id"]),
            first_name=r.get("first_name") or "",
            last_name=r.get("last_name") or "",
            email=r.get("email") or "",
            department=department,
            position=r.get("position") or "",
            status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
            hire_date=r.get("hire_date") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department.value if self.department else None,
            "position": self.position,
            "status": self.status.value,
            "hire_date": self.hire_date,
        }
