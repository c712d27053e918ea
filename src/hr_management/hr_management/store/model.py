from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..core.enums import WhereOperator

Record = dict[str, Any]


@dataclass(frozen=True)
class WhereClause:
    """One filter condition; clauses passed together are ANDed."""

    field: str
    operator: WhereOperator
    values: Sequence[Any] = field(default_factory=tuple)

    @classmethod
    def equal_to(cls, field_name: str, *values: Any) -> "WhereClause":
        return cls(field_name, WhereOperator.EQUAL_TO, tuple(values))

    @classmethod
    def contains(cls, field_name: str, value: str) -> "WhereClause":
        return cls(field_name, WhereOperator.CONTAINS, (value,))

    @classmethod
    def at_least(cls, field_name: str, value: Any) -> "WhereClause":
        return cls(field_name, WhereOperator.GREATER_THAN_OR_EQUAL_TO, (value,))

    @classmethod
    def at_most(cls, field_name: str, value: Any) -> "WhereClause":
        return cls(field_name, WhereOperator.LESS_THAN_OR_EQUAL_TO, (value,))


@dataclass(frozen=True)
class StoreResult:
    """Outcome of one record in a create/update/delete batch."""

    success: bool
    data: Optional[Record] = None
    message: Optional[str] = None
