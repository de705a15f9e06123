"""Half-month and whole-month date ranges with their display labels."""

from __future__ import annotations

from datetime import date
from typing import Tuple

from ..common.datetime_utils import month_end, ordinal_suffix, to_iso
from ..core.constants import FIRST_HALF_END_DAY, SECOND_HALF_START_DAY
from .model import Period


def first_half(year: int, month: int) -> Tuple[date, date]:
    return date(year, month, 1), date(year, month, FIRST_HALF_END_DAY)


def second_half(year: int, month: int) -> Tuple[date, date]:
    return date(year, month, SECOND_HALF_START_DAY), month_end(year, month)


def whole_month(year: int, month: int) -> Tuple[date, date]:
    return date(year, month, 1), month_end(year, month)


def first_half_period(year: int, month: int, *, auto: bool) -> Period:
    start, end = first_half(year, month)
    return Period(
        start=to_iso(start),
        end=to_iso(end),
        label=f"1st - {FIRST_HALF_END_DAY}th {start.strftime('%b %Y')}",
        is_auto_detected=auto,
    )


def second_half_period(year: int, month: int, *, auto: bool) -> Period:
    start, end = second_half(year, month)
    return Period(
        start=to_iso(start),
        end=to_iso(end),
        label=f"{SECOND_HALF_START_DAY}th - {end.day}{ordinal_suffix(end.day)} {start.strftime('%b %Y')}",
        is_auto_detected=auto,
    )


def whole_month_period(year: int, month: int, *, auto: bool) -> Period:
    start, end = whole_month(year, month)
    return Period(
        start=to_iso(start),
        end=to_iso(end),
        label=f"Full {start.strftime('%B %Y')}",
        is_auto_detected=auto,
    )
