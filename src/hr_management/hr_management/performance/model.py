from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PerformanceReview:
    review_id: str
    employee_id: str
    quarter: str
    score: float
    review_date: str
    goals: str = ""

    @classmethod
    def from_record(cls, r: dict[str, Any]) -> "PerformanceReview":
        return cls(
            review_id=str(r["id"]),
            employee_id=str(r.get("employee_id") or ""),
            quarter=r.get("quarter") or "",
            score=float(r.get("score") or 0),
            review_date=r.get("review_date") or "",
            goals=r.get("goals") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.review_id,
            "employee_id": self.employee_id,
            "quarter": self.quarter,
            "score": self.score,
            "review_date": self.review_date,
            "goals": self.goals,
        }
