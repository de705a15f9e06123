from __future__ import annotations

import math
from enum import Enum
from typing import Type, TypeVar

from ..core.constants import MAX_HOURS_PER_DAY
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_enum(value, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


def require_number(value, field_name: str) -> float:
    """Finite number; missing values count as 0."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_int(value, field_name: str) -> int:
    number = require_number(value, field_name)
    if not number.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    return int(number)


def require_bool(value, field_name: str, default: bool = False) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_hours(value, field_name: str = "hours") -> float:
    if value is None:
        raise ValidationError(f"{field_name} must be a number")
    hours = require_number(value, field_name)
    if not 0 <= hours <= MAX_HOURS_PER_DAY:
        raise ValidationError(f"{field_name} must be between 0 and {MAX_HOURS_PER_DAY}")
    return hours


def require_percent(value, field_name: str) -> float:
    percent = require_number(value, field_name)
    if not 0 <= percent <= 100:
        raise ValidationError(f"{field_name} must be between 0 and 100")
    return percent


def require_non_negative(value, field_name: str) -> float:
    number = require_number(value, field_name)
    if not number >= 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number
