from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DepartmentRecord:
    department_id: str
    name: str

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "DepartmentRecord":
        return cls(department_id=str(r["id"]), name=r.get("name") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.department_id, "name": self.name}
