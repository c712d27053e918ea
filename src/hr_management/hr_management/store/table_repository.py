from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from ..core.exceptions import StoreError
from .model import Record, StoreResult, WhereClause
from .record_store import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TableRepository(Generic[T]):
    """Typed access to one Record Store table.

    Converts raw records into domain models at the store boundary and turns
    store exceptions or unsuccessful results into StoreError.
    """

    table: str = ""

    def __init__(self, store: RecordStore, *, to_model: Callable[[Record], T]):
        self._store = store
        self._to_model = to_model

    def _call(self, action: str, fn: Callable[[], Any]) -> Any:
        try:
            return fn()
        except StoreError:
            raise
        except Exception as e:
            logger.exception("Error %s %s", action, self.table)
            raise StoreError(f"Failed {action} {self.table}: {e}") from e

    @staticmethod
    def _first(results: Sequence[StoreResult], failure: str) -> StoreResult:
        if not results:
            raise StoreError(failure)
        result = results[0]
        if not result.success:
            raise StoreError(result.message or failure)
        return result

    def fetch(self, where: Optional[Sequence[WhereClause]] = None) -> list[T]:
        rows = self._call("fetching", lambda: self._store.fetch(self.table, where=where))
        return [self._to_model(r) for r in rows or []]

    def get_by_id(self, record_id: Any) -> Optional[T]:
        row = self._call("fetching", lambda: self._store.get_by_id(self.table, record_id))
        return self._to_model(row) if row else None

    def create(self, record: Record) -> T:
        results = self._call("creating", lambda: self._store.create(self.table, [record]))
        result = self._first(results, f"Failed to create {self.table} record")
        return self._to_model(result.data or {})

    def create_many(self, records: Sequence[Record]) -> list[StoreResult]:
        if not records:
            return []
        return self._call("creating", lambda: self._store.create(self.table, list(records)))

    def update(self, record_id: Any, fields: Record) -> T:
        payload = {**fields, "id": record_id}
        results = self._call("updating", lambda: self._store.update(self.table, [payload]))
        result = self._first(results, f"Failed to update {self.table} record")
        return self._to_model(result.data or payload)

    def delete(self, record_id: Any) -> bool:
        results = self._call("deleting", lambda: self._store.delete(self.table, [record_id]))
        return bool(results) and results[0].success

    def delete_many(self, ids: Sequence[Any]) -> list[StoreResult]:
        if not ids:
            return []
        return self._call("deleting", lambda: self._store.delete(self.table, list(ids)))
