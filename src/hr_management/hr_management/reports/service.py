from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.validators import require_choice, require_non_empty
from ..core.enums import ReportFrequency
from ..core.exceptions import NotFoundError, StoreError
from .model import ReportSchedule
from .repository import ReportScheduleRepository

logger = logging.getLogger(__name__)


class ReportScheduleService:
    """Stores report-delivery preferences; delivery itself is not implemented."""

    def __init__(self, schedules: ReportScheduleRepository):
        self._schedules = schedules

    def list_schedules(self) -> list[ReportSchedule]:
        return self._schedules.fetch()

    def schedule(self, *, email: str, frequency: Optional[str] = None, enabled: bool = True) -> ReportSchedule:
        email = require_non_empty(email, "Email address")
        freq = require_choice(frequency or ReportFrequency.WEEKLY.value, ReportFrequency, "Frequency")
        created = self._schedules.create({"frequency": freq.value, "email": email, "enabled": bool(enabled)})
        logger.info("Report scheduled %s to %s", created.frequency.value, created.email)
        return created

    def update(self, schedule_id: str, changes: dict[str, Any]) -> ReportSchedule:
        existing = self._schedules.get_by_id(schedule_id)
        if not existing:
            raise NotFoundError(f"Report schedule {schedule_id} not found")
        fields: dict[str, Any] = {}
        if "email" in changes:
            fields["email"] = require_non_empty(changes["email"], "Email address")
        if "frequency" in changes:
            fields["frequency"] = require_choice(changes["frequency"], ReportFrequency, "Frequency").value
        if "enabled" in changes:
            fields["enabled"] = bool(changes["enabled"])
        if not fields:
            return existing
        return self._schedules.update(schedule_id, fields)

    def delete(self, schedule_id: str) -> None:
        if not self._schedules.delete(schedule_id):
            raise StoreError(f"Failed to delete report schedule {schedule_id}")
