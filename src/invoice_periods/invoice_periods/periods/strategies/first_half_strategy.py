from __future__ import annotations

from datetime import date

from ...common.datetime_utils import previous_month
from ...core.constants import SECOND_HALF_START_DAY
from ..model import Period
from ..ranges import first_half_period
from .base import PeriodStrategy


class FirstHalfStrategy(PeriodStrategy):
    """Invoiced on the 15th: always a 1st-15th window."""

    def detect(self, *, today: date) -> Period:
        if today.day >= SECOND_HALF_START_DAY:
            return first_half_period(today.year, today.month, auto=True)
        year, month = previous_month(today.year, today.month)
        return first_half_period(year, month, auto=True)
