from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Record, StoreResult, WhereClause


class RecordStore(Protocol):
    """Table-oriented persistence service the application reads and writes through.

    Note (DIP): repositories depend on this interface, not on a concrete backend.
    Implementations return fetched records in append order.
    """

    def fetch(
        self,
        table: str,
        *,
        fields: Optional[Sequence[str]] = None,
        where: Optional[Sequence[WhereClause]] = None,
    ) -> list[Record]:
        raise NotImplementedError

    def get_by_id(self, table: str, record_id: Any, *, fields: Optional[Sequence[str]] = None) -> Optional[Record]:
        raise NotImplementedError

    def create(self, table: str, records: Sequence[Record]) -> list[StoreResult]:
        raise NotImplementedError

    def update(self, table: str, records: Sequence[Record]) -> list[StoreResult]:
        raise NotImplementedError

    def delete(self, table: str, ids: Sequence[Any]) -> list[StoreResult]:
        raise NotImplementedError
