from __future__ import annotations

from ..core.constants import REPORT_SCHEDULES_TABLE
from ..store.record_store import RecordStore
from ..store.table_repository import TableRepository
from .model import ReportSchedule


class ReportScheduleRepository(TableRepository[ReportSchedule]):
    table = REPORT_SCHEDULES_TABLE

    def __init__(self, store: RecordStore):
        super().__init__(store, to_model=ReportSchedule.from_record)
