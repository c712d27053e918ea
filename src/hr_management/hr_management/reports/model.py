from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import ReportFrequency


@dataclass(frozen=True)
class ReportSchedule:
    """Preference record for periodic analytics reports. Nothing is ever sent."""

    schedule_id: str
    frequency: ReportFrequency
    email: str
    enabled: bool = False

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "ReportSchedule":
        return cls(
            schedule_id=str(r["id"]),
            frequency=ReportFrequency(r.get("frequency") or ReportFrequency.WEEKLY.value),
            email=r.get("email") or "",
            enabled=bool(r.get("enabled")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.schedule_id,
            "frequency": self.frequency.value,
            "email": self.email,
            "enabled": self.enabled,
        }
