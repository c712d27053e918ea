from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_selection(values: Optional[Iterable[Any]], what: str) -> list:
    items = [v for v in (values or []) if v is not None and str(v).strip()]
    if not items:
        raise ValidationError(f"Please select at least one {what}")
    return items


def require_choice(value: Any, enum_type: Type[E], field_name: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_type)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def optional_choice(value: Any, enum_type: Type[E], field_name: str) -> Optional[E]:
    if value is None or value == "":
        return None
    return require_choice(value, enum_type, field_name)
