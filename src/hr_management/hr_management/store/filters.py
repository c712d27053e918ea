from __future__ import annotations

from typing import Any, Sequence

from ..core.enums import WhereOperator
from .model import Record, WhereClause


def _comparable(value: Any) -> Any:
    # Numbers compare numerically, everything else (ISO dates included) as text.
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    return "" if value is None else str(value)


def clause_matches(record: Record, clause: WhereClause) -> bool:
    value = record.get(clause.field)
    values = list(clause.values)

    if clause.operator == WhereOperator.EQUAL_TO:
        return any(str(value) == str(v) for v in values)

    if clause.operator == WhereOperator.CONTAINS:
        text = "" if value is None else str(value).lower()
        return any(str(v).lower() in text for v in values)

    if not values or value is None or value == "":
        return False

    left, right = _comparable(value), _comparable(values[0])
    if type(left) is not type(right):
        left, right = str(left), str(right)
    if clause.operator == WhereOperator.GREATER_THAN_OR_EQUAL_TO:
        return left >= right
    if clause.operator == WhereOperator.LESS_THAN_OR_EQUAL_TO:
        return left <= right

    raise ValueError(f"Unsupported operator: {clause.operator!r}")


def matches_all(record: Record, where: Sequence[WhereClause]) -> bool:
    return all(clause_matches(record, c) for c in where)


def project_fields(record: Record, fields: Sequence[str] | None) -> Record:
    if not fields:
        return dict(record)
    out = {"id": record.get("id")}
    for f in fields:
        if f in record:
            out[f] = record[f]
    return out
