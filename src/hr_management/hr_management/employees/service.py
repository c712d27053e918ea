from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import day_key, parse_iso_date
from ..common.validators import optional_choice, require_choice, require_non_empty
from ..core.enums import Department, EmployeeStatus
from ..core.exceptions import NotFoundError, StoreError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_EDITABLE = ("first_name", "last_name", "email", "department", "position", "status", "hire_date")


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> list[Employee]:
        return self._employees.fetch()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def search(self, term: str) -> list[Employee]:
        term = (term or "").strip()
        if not term:
            return self.list_employees()
        return self._employees.search_by_first_name(term)

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        department: Optional[str] = None,
        position: str = "",
        status: Optional[str] = None,
        hire_date: Optional[str] = None,
    ) -> Employee:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        email = require_non_empty(email, "Email")
        dept = optional_choice(department, Department, "Department")
        emp_status = require_choice(status or EmployeeStatus.ACTIVE.value, EmployeeStatus, "Status")
        if hire_date:
            parse_iso_date(hire_date)

        employee = self._employees.create(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "department": dept.value if dept else None,
                "position": (position or "").strip(),
                "status": emp_status.value,
                "hire_date": hire_date or day_key(),
            }
        )
        logger.info("Created employee %s (%s)", employee.employee_id, employee.full_name)
        return employee

    def update(self, employee_id: str, changes: dict[str, Any]) -> Employee:
        current = self.get(employee_id)
        fields = {k: v for k, v in changes.items() if k in _EDITABLE}
        for name, label in (("first_name", "First name"), ("last_name", "Last name"), ("email", "Email")):
            if name in fields:
                fields[name] = require_non_empty(fields[name], label)
        if "department" in fields:
            dept = optional_choice(fields["department"], Department, "Department")
            fields["department"] = dept.value if dept else None
        if "status" in fields:
            fields["status"] = require_choice(fields["status"], EmployeeStatus, "Status").value
        if fields.get("hire_date"):
            parse_iso_date(fields["hire_date"])
        if not fields:
            return current
        return self._employees.update(employee_id, fields)

    def set_status(self, employee_id: str, status: str) -> Employee:
        return self.update(employee_id, {"status": status})

    def delete(self, employee_id: str) -> None:
        # Attendance, reviews and assignments referencing the employee are kept.
        self.get(employee_id)
        if not self._employees.delete(employee_id):
            raise StoreError(f"Failed to delete employee {employee_id}")
        logger.info("Deleted employee %s", employee_id)
