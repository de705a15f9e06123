from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Tuple, Union

from ..core.exceptions import ValidationError

ISO_FMT = "%Y-%m-%d"

DateLike = Union[str, date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_FMT).date()


def to_date(value: DateLike) -> date:
    """Normalize a date-like value (ISO string, date or datetime) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None
    raise ValidationError(f"Unsupported date value: {value!r}")


def to_iso(value: date) -> str:
    return value.strftime(ISO_FMT)


def month_end(year: int, month: int) -> date:
    """Last calendar day of the month, leap years included."""
    return date(year, month, calendar.monthrange(year, month)[1])


def previous_month(year: int, month: int) -> Tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def ordinal_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every date in the inclusive range [start, end]."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()
