from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.constants import TABLE_FIELDS
from ..core.enums import WhereOperator
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Record, StoreResult, WhereClause
from .record_store import RecordStore

logger = logging.getLogger(__name__)


def _columns(table: str, fields: Optional[Sequence[str]] = None) -> list[str]:
    known = TABLE_FIELDS.get(table)
    if known is None:
        raise ValueError(f"Unknown table: {table!r}")
    if not fields:
        return list(known)
    unknown = [f for f in fields if f not in known and f != "id"]
    if unknown:
        raise ValueError(f"Unknown column(s) for {table}: {', '.join(unknown)}")
    return [f for f in fields if f != "id"]


def _where_sql(table: str, where: Sequence[WhereClause]) -> tuple[str, list[Any]]:
    clauses: list[str] = []
    params: list[Any] = []
    for c in where:
        col = "id" if c.field == "id" else _columns(table, [c.field])[0]
        values = list(c.values)
        if c.operator == WhereOperator.EQUAL_TO:
            if not values:
                clauses.append("1=0")
                continue
            clauses.append(f"`{col}` IN ({', '.join(['%s'] * len(values))})")
            params.extend(values)
        elif c.operator == WhereOperator.CONTAINS:
            clauses.append(f"LOWER(`{col}`) LIKE %s")
            params.append(f"%{str(values[0]).lower()}%" if values else "%")
        elif c.operator == WhereOperator.GREATER_THAN_OR_EQUAL_TO:
            clauses.append(f"`{col}` >= %s")
            params.append(values[0])
        elif c.operator == WhereOperator.LESS_THAN_OR_EQUAL_TO:
            clauses.append(f"`{col}` <= %s")
            params.append(values[0])
        else:
            raise ValueError(f"Unsupported operator: {c.operator!r}")
    return (" WHERE " + " AND ".join(clauses)) if clauses else "", params


class MySQLRecordStore(RecordStore):
    """Record Store backed by one MySQL table per record type.

    Each record of a create/update/delete batch runs in its own transaction so a
    failing row is reported without rolling back its siblings.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch(
        self,
        table: str,
        *,
        fields: Optional[Sequence[str]] = None,
        where: Optional[Sequence[WhereClause]] = None,
    ) -> list[Record]:
        cols = ", ".join(f"`{c}`" for c in ["id", *_columns(table, fields)])
        where_sql, params = _where_sql(table, where or ())
        with db_cursor(self._conn_factory) as (_, cur):
            # id order == append order
            cur.execute(f"SELECT {cols} FROM `{table}`{where_sql} ORDER BY `id` ASC", tuple(params))
            return fetchall(cur)

    def get_by_id(self, table: str, record_id: Any, *, fields: Optional[Sequence[str]] = None) -> Optional[Record]:
        cols = ", ".join(f"`{c}`" for c in ["id", *_columns(table, fields)])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {cols} FROM `{table}` WHERE `id`=%s", (record_id,))
            return fetchone(cur)

    def create(self, table: str, records: Sequence[Record]) -> list[StoreResult]:
        results = []
        for rec in records:
            cols = [c for c in _columns(table) if c in rec]
            try:
                with db_cursor(self._conn_factory) as (_, cur):
                    cur.execute(
                        f"INSERT INTO `{table}` ({', '.join(f'`{c}`' for c in cols)}) "
                        f"VALUES ({', '.join(['%s'] * len(cols))})",
                        tuple(rec[c] for c in cols),
                    )
                    new_id = int(cur.lastrowid)
                results.append(StoreResult(success=True, data={**{c: rec[c] for c in cols}, "id": new_id}))
            except mysql.connector.Error as e:
                logger.warning("Insert into %s failed: %s", table, e)
                results.append(StoreResult(success=False, message=str(e)))
        return results

    def update(self, table: str, records: Sequence[Record]) -> list[StoreResult]:
        results = []
        for rec in records:
            cols = [c for c in _columns(table) if c in rec]
            if rec.get("id") is None or not cols:
                results.append(StoreResult(success=False, message="Update requires an id and at least one field"))
                continue
            try:
                with db_cursor(self._conn_factory) as (_, cur):
                    cur.execute(
                        f"UPDATE `{table}` SET {', '.join(f'`{c}`=%s' for c in cols)} WHERE `id`=%s",
                        (*[rec[c] for c in cols], rec["id"]),
                    )
                    cur.execute(f"SELECT * FROM `{table}` WHERE `id`=%s", (rec["id"],))
                    row = fetchone(cur)
                if row is None:
                    results.append(StoreResult(success=False, message=f"Record {rec['id']!r} not found in {table}"))
                else:
                    results.append(StoreResult(success=True, data=row))
            except mysql.connector.Error as e:
                logger.warning("Update of %s #%s failed: %s", table, rec.get("id"), e)
                results.append(StoreResult(success=False, message=str(e)))
        return results

    def delete(self, table: str, ids: Sequence[Any]) -> list[StoreResult]:
        results = []
        for record_id in ids:
            try:
                with db_cursor(self._conn_factory) as (_, cur):
                    cur.execute(f"DELETE FROM `{table}` WHERE `id`=%s", (record_id,))
                    deleted = cur.rowcount > 0
                results.append(
                    StoreResult(success=True, data={"id": record_id})
                    if deleted
                    else StoreResult(success=False, message=f"Record {record_id!r} not found in {table}")
                )
            except mysql.connector.Error as e:
                logger.warning("Delete of %s #%s failed: %s", table, record_id, e)
                results.append(StoreResult(success=False, message=str(e)))
        return results
