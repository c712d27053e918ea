from __future__ import annotations

import itertools
import logging
import threading
from typing import Any, Optional, Sequence

from .filters import matches_all, project_fields
from .model import Record, StoreResult, WhereClause
from .record_store import RecordStore

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """Process-local Record Store.

    Records keep insertion order per table and get integer ids. A lock guards
    every operation so bulk mutations issued from worker threads are safe.
    """

    def __init__(self, seed: Optional[dict[str, Sequence[Record]]] = None):
        self._tables: dict[str, dict[int, Record]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        for table, records in (seed or {}).items():
            self.create(table, records)

    def _table(self, table: str) -> dict[int, Record]:
        return self._tables.setdefault(table, {})

    def fetch(
        self,
        table: str,
        *,
        fields: Optional[Sequence[str]] = None,
        where: Optional[Sequence[WhereClause]] = None,
    ) -> list[Record]:
        with self._lock:
            rows = list(self._table(table).values())
        return [project_fields(r, fields) for r in rows if matches_all(r, where or ())]

    def get_by_id(self, table: str, record_id: Any, *, fields: Optional[Sequence[str]] = None) -> Optional[Record]:
        try:
            key = int(record_id)
        except (TypeError, ValueError):
            return None
        with self._lock:
            row = self._table(table).get(key)
        return project_fields(row, fields) if row else None

    def create(self, table: str, records: Sequence[Record]) -> list[StoreResult]:
        results = []
        with self._lock:
            rows = self._table(table)
            for rec in records:
                new_id = next(self._ids)
                row = {k: v for k, v in rec.items() if k != "id"}
                row["id"] = new_id
                rows[new_id] = row
                results.append(StoreResult(success=True, data=dict(row)))
        logger.debug("Created %d record(s) in %s", len(results), table)
        return results

    def update(self, table: str, records: Sequence[Record]) -> list[StoreResult]:
        results = []
        with self._lock:
            rows = self._table(table)
            for rec in records:
                try:
                    key = int(rec.get("id"))
                except (TypeError, ValueError):
                    key = None
                if key not in rows:
                    results.append(StoreResult(success=False, message=f"Record {rec.get('id')!r} not found in {table}"))
                    continue
                rows[key].update({k: v for k, v in rec.items() if k != "id"})
                results.append(StoreResult(success=True, data=dict(rows[key])))
        return results

    def delete(self, table: str, ids: Sequence[Any]) -> list[StoreResult]:
        results = []
        with self._lock:
            rows = self._table(table)
            for record_id in ids:
                try:
                    removed = rows.pop(int(record_id), None)
                except (TypeError, ValueError):
                    removed = None
                if removed is None:
                    results.append(StoreResult(success=False, message=f"Record {record_id!r} not found in {table}"))
                else:
                    results.append(StoreResult(success=True, data={"id": removed["id"]}))
        return results
