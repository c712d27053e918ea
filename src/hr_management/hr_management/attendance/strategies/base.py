from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..model import AttendanceRecord


class MutationAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class MutationPlan:
    """What to write to the store: a new record, or fields of an existing one."""

    action: MutationAction
    employee_id: str
    fields: dict[str, Any] = field(default_factory=dict)
    record_id: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how one attendance action changes today's record."""

    @abstractmethod
    def plan(
        self,
        *,
        employee_id: str,
        today: str,
        clock: str,
        current: Optional[AttendanceRecord],
    ) -> MutationPlan:
        raise NotImplementedError
