from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """One short-lived connection and transaction; commits on success, rolls back on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def normalize_value(value: Any) -> Any:
    """Map connector column types back onto plain record values.

    DECIMAL columns (review scores) come back as Decimal, and some connector
    builds return VARCHAR as bytearray.
    """
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return value


def _normalize_row(row: Any) -> Any:
    if isinstance(row, dict):
        return {k: normalize_value(v) for k, v in row.items()}
    return tuple(normalize_value(v) for v in row)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return _normalize_row(row) if row else None


def fetchall(cur) -> List[Any]:
    return [_normalize_row(r) for r in cur.fetchall() or []]
