from __future__ import annotations

from typing import Any, Optional

from ..common.datetime_utils import day_key, parse_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from .model import PerformanceReview
from .repository import PerformanceRepository

_EDITABLE = ("quarter", "score", "review_date", "goals")


def _score(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError("Score must be a number")


class PerformanceService:
    def __init__(self, reviews: PerformanceRepository):
        self._reviews = reviews

    def list_reviews(self, employee_id: Optional[str] = None) -> list[PerformanceReview]:
        if employee_id:
            return self._reviews.for_employee(employee_id)
        return self._reviews.fetch()

    def create(
        self,
        *,
        employee_id: str,
        quarter: str,
        score: Any,
        review_date: Optional[str] = None,
        goals: str = "",
    ) -> PerformanceReview:
        employee_id = require_non_empty(employee_id, "Employee")
        if review_date:
            parse_iso_date(review_date)
        return self._reviews.create(
            {
                "employee_id": employee_id,
                "quarter": require_non_empty(quarter, "Quarter"),
                "score": _score(score),
                "review_date": review_date or day_key(),
                "goals": (goals or "").strip(),
            }
        )

    def update(self, review_id: str, changes: dict[str, Any]) -> PerformanceReview:
        current = self._reviews.get_by_id(review_id)
        if not current:
            raise NotFoundError(f"Performance review {review_id} not found")
        fields = {k: v for k, v in changes.items() if k in _EDITABLE}
        if "score" in fields:
            fields["score"] = _score(fields["score"])
        if fields.get("review_date"):
            parse_iso_date(fields["review_date"])
        if not fields:
            return current
        return self._reviews.update(review_id, fields)

    def delete(self, review_id: str) -> None:
        if not self._reviews.delete(review_id):
            raise StoreError(f"Failed to delete performance review {review_id}")
